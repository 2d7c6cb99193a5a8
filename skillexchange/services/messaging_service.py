# skillexchange/services/messaging_service.py
"""
Messaging Service Layer
Conversation threading, sending and read receipts
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from sqlalchemy.orm import Session

from skillexchange.crud import message as message_crud
from skillexchange.crud import user as user_crud
from skillexchange.database import commit_or_raise
from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.models.message import Message

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 5000


class Conversation(NamedTuple):
    counterpart_id: int
    last_message: Message


def _recency_key(message: Message):
    # Equal timestamps fall back to id, so the later insert counts as newer.
    return (message.created_at, message.id)


def counterpart_of(message: Message, user_id: int) -> int:
    return message.receiver_id if message.sender_id == user_id else message.sender_id


def is_unread(message: Message, viewer_id: int) -> bool:
    """Unread for the viewer only if they received it and have not read it."""
    return not message.is_read and message.receiver_id == viewer_id


def list_conversations(user_id: int, messages: Iterable[Message]) -> List[Conversation]:
    """
    Group the user's messages by the other participant.

    Keeps the most recent message per counterpart and orders the groups
    newest first. Messages that do not involve ``user_id`` are ignored. The
    input is not mutated, so calling this again gives the same result.
    """
    latest: Dict[int, Message] = {}
    for message in messages:
        if user_id not in (message.sender_id, message.receiver_id):
            continue
        other_id = counterpart_of(message, user_id)
        current = latest.get(other_id)
        if current is None or _recency_key(message) > _recency_key(current):
            latest[other_id] = message

    ordered = sorted(latest.items(), key=lambda item: _recency_key(item[1]), reverse=True)
    return [Conversation(counterpart_id=other_id, last_message=message) for other_id, message in ordered]


# ======================
# STORE-BACKED OPERATIONS
# ======================

def list_messages(db: Session, user_id: int) -> List[Message]:
    return message_crud.get_messages_by_user(db, user_id)


def list_user_conversations(db: Session, user_id: int) -> List[dict]:
    messages = message_crud.get_messages_by_user(db, user_id)

    unread_by_counterpart: Dict[int, int] = {}
    for message in messages:
        if is_unread(message, user_id):
            unread_by_counterpart[message.sender_id] = unread_by_counterpart.get(message.sender_id, 0) + 1

    return [
        {
            "counterpart_id": conversation.counterpart_id,
            "last_message": conversation.last_message,
            "is_unread": is_unread(conversation.last_message, user_id),
            "unread_count": unread_by_counterpart.get(conversation.counterpart_id, 0),
        }
        for conversation in list_conversations(user_id, messages)
    ]


def get_conversation(db: Session, user_id: int, other_id: int) -> List[Message]:
    """All messages between the two users, oldest first."""
    return message_crud.get_conversation(db, user_id, other_id)


def send_message(db: Session, sender_id: int, receiver_id: int, content: Optional[str]) -> Message:
    text = (content or "").strip()
    if not text:
        raise ValidationError("Message content cannot be empty", {"content": "Message cannot be empty"})
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            "Message is too long",
            {"content": f"Message must be {MAX_MESSAGE_LENGTH} characters or less"},
        )
    if sender_id == receiver_id:
        raise ValidationError("Cannot send a message to yourself", {"receiver_id": "Choose another user"})
    if not user_crud.get_user(db, receiver_id):
        raise NotFoundError("Receiver not found")

    message = message_crud.create_message(
        db,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=text,
    )
    commit_or_raise(db, "send message")
    db.refresh(message)

    logger.info("Message %s sent from user %s to user %s", message.id, sender_id, receiver_id)
    return message


def mark_read(db: Session, message_id: int, caller_id: int) -> Message:
    message = message_crud.get_message(db, message_id)
    if not message:
        raise NotFoundError("Message not found")
    if message.receiver_id != caller_id:
        logger.warning("User %s tried to mark message %s for user %s as read", caller_id, message_id, message.receiver_id)
        raise AuthorizationError("Not authorized to mark this message as read")

    if not message.is_read:
        message.is_read = True
        commit_or_raise(db, "mark message as read")
        db.refresh(message)
    return message


def get_unread_count(db: Session, user_id: int) -> int:
    return message_crud.count_unread(db, user_id)
