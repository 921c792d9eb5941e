from .category import CategoryResponse, CategoryBrief
from .product import ProductRequest, ProductResponse
from .dashboard import ProductSummary, DashboardResponse
from .auth import LoginRequest, LoginResponse, UserRole

__all__ = [
    "CategoryResponse", "CategoryBrief",
    "ProductRequest", "ProductResponse",
    "ProductSummary", "DashboardResponse",
    "LoginRequest", "LoginResponse", "UserRole",
]
