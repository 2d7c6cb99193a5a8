from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.database import get_db
from skillexchange.schemas.exchange import ExchangeCreate, ExchangeResponse, ExchangeUpdate
from skillexchange.services import exchange_service
from skillexchange.utils.security import get_current_user

router = APIRouter(prefix="/api/exchanges", tags=["Exchanges"])


@router.get("", response_model=List[ExchangeResponse])
def get_my_exchanges(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return exchange_service.list_user_exchanges(db, current_user.id)


@router.post("", response_model=ExchangeResponse, status_code=status.HTTP_201_CREATED)
def create_exchange(
    payload: ExchangeCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return exchange_service.request_exchange(
        db,
        caller_id=current_user.id,
        student_id=payload.student_id,
        teacher_id=payload.teacher_id,
        teacher_skill_id=payload.teacher_skill_id,
    )


@router.put("/{exchange_id}", response_model=ExchangeResponse)
def update_exchange(
    exchange_id: int,
    patch: ExchangeUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return exchange_service.update_exchange(db, exchange_id, current_user.id, patch)
