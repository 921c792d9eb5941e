"""Catalog API: products, categories and inventory dashboard."""
