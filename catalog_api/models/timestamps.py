from datetime import datetime, timezone


def utc_now() -> datetime:
    """Текущее время в UTC с tzinfo (naive datetime SQLModel не принимает)"""
    return datetime.now(timezone.utc)
