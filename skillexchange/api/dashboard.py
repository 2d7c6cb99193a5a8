from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.database import get_db
from skillexchange.schemas.dashboard import DashboardStats
from skillexchange.services import dashboard_service
from skillexchange.utils.security import get_current_user

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return dashboard_service.get_dashboard_stats(db, current_user.id)
