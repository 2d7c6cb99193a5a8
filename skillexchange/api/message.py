from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.database import get_db
from skillexchange.schemas.message import ConversationSummary, MessageCreate, MessageResponse
from skillexchange.services import messaging_service
from skillexchange.utils.security import get_current_user

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.get("", response_model=List[MessageResponse])
def get_my_messages(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return messaging_service.list_messages(db, current_user.id)


@router.get("/conversations", response_model=List[ConversationSummary])
def get_my_conversations(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return messaging_service.list_user_conversations(db, current_user.id)


@router.get("/unread-count")
def get_unread_count(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"unread_count": messaging_service.get_unread_count(db, current_user.id)}


@router.get("/conversation/{user_id}", response_model=List[MessageResponse])
def get_conversation(
    user_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return messaging_service.get_conversation(db, current_user.id, user_id)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    payload: MessageCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # Sender is always the caller, whatever the client sends.
    return messaging_service.send_message(db, current_user.id, payload.receiver_id, payload.content)


@router.put("/{message_id}/read")
def mark_message_read(
    message_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    message = messaging_service.mark_read(db, message_id, current_user.id)
    return {"success": True, "id": message.id}
