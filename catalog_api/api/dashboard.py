from fastapi import APIRouter, Depends
from sqlmodel import Session
from catalog_api.api.deps import get_db
from catalog_api.schemas.dashboard import DashboardResponse
from catalog_api.services.inventory import get_dashboard

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard_summary(db: Session = Depends(get_db)):
    """Статистика для дашборда"""
    return get_dashboard(db)
