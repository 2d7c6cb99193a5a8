from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from skillexchange.models.message import Message
from skillexchange.utils.clock import utcnow


def create_message(db: Session, *, sender_id: int, receiver_id: int, content: str, created_at=None) -> Message:
    message = Message(
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content,
        is_read=False,
        created_at=created_at or utcnow(),
    )
    db.add(message)
    db.flush()
    return message


def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.query(Message).filter(Message.id == message_id).first()


def get_messages_by_user(db: Session, user_id: int) -> List[Message]:
    """Every message the user sent or received, newest first."""
    return (
        db.query(Message)
        .filter(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
        .order_by(Message.created_at.desc(), Message.id.desc())
        .all()
    )


def get_conversation(db: Session, user1_id: int, user2_id: int) -> List[Message]:
    return (
        db.query(Message)
        .filter(
            or_(
                and_(Message.sender_id == user1_id, Message.receiver_id == user2_id),
                and_(Message.sender_id == user2_id, Message.receiver_id == user1_id),
            )
        )
        .order_by(Message.created_at.asc(), Message.id.asc())
        .all()
    )


def count_unread(db: Session, user_id: int) -> int:
    return db.query(Message).filter(
        Message.receiver_id == user_id,
        Message.is_read.is_(False),
    ).count()
