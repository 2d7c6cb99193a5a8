# tests/test_messaging_service.py
"""
Messaging tests
Conversation derivation, sending and read receipts
"""

from datetime import datetime, timedelta

import pytest

from skillexchange.crud import message as message_crud
from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.models.message import Message
from skillexchange.services import messaging_service
from skillexchange.services.messaging_service import is_unread, list_conversations

T0 = datetime(2024, 1, 1, 12, 0, 0)


def _msg(id, sender_id, receiver_id, minutes, content="", is_read=False):
    return Message(
        id=id,
        sender_id=sender_id,
        receiver_id=receiver_id,
        content=content or f"message {id}",
        is_read=is_read,
        created_at=T0 + timedelta(minutes=minutes),
    )


# ======================
# CONVERSATION DERIVATION
# ======================

def test_conversations_keep_latest_message_per_counterpart():
    """A(t=1, u2), B(t=3, u2), C(t=2, u3) gives [(u2, B), (u3, C)]"""
    a = _msg(1, 1, 2, 1, "A")
    b = _msg(2, 2, 1, 3, "B")
    c = _msg(3, 1, 3, 2, "C")

    conversations = list_conversations(1, [a, b, c])

    assert [(conv.counterpart_id, conv.last_message.content) for conv in conversations] == [(2, "B"), (3, "C")]


def test_conversations_are_newest_first_regardless_of_input_order():
    messages = [_msg(1, 1, 3, 5), _msg(2, 4, 1, 9), _msg(3, 1, 2, 1)]
    ordered = list_conversations(1, messages)
    assert [conv.counterpart_id for conv in ordered] == [4, 3, 2]
    assert list_conversations(1, list(reversed(messages))) == ordered


def test_conversations_ignore_unrelated_messages_and_do_not_mutate_input():
    messages = [_msg(1, 2, 3, 1), _msg(2, 1, 2, 0)]
    snapshot = list(messages)
    conversations = list_conversations(1, messages)
    assert [conv.counterpart_id for conv in conversations] == [2]
    assert messages == snapshot
    assert list_conversations(1, messages) == conversations


def test_equal_timestamps_prefer_later_id():
    first = _msg(1, 1, 2, 3, "first")
    second = _msg(2, 2, 1, 3, "second")
    [conversation] = list_conversations(1, [second, first])
    assert conversation.last_message.content == "second"


def test_no_messages_means_no_conversations():
    assert list_conversations(1, []) == []


def test_unread_is_viewer_relative():
    message = _msg(1, 1, 2, 0)
    assert is_unread(message, 2)
    assert not is_unread(message, 1)
    message.is_read = True
    assert not is_unread(message, 2)


# ======================
# SENDING
# ======================

def test_send_creates_unread_message(db_session, users):
    alice, bob = users["alice"], users["bob"]
    message = messaging_service.send_message(db_session, alice.id, bob.id, "hi")

    assert message.id is not None
    assert message.content == "hi"
    assert message.is_read is False
    assert message.created_at is not None
    assert messaging_service.get_unread_count(db_session, bob.id) == 1
    assert messaging_service.get_unread_count(db_session, alice.id) == 0


@pytest.mark.parametrize("content", ["", "   \n\t ", None])
def test_send_rejects_blank_content(db_session, users, content):
    with pytest.raises(ValidationError) as exc:
        messaging_service.send_message(db_session, users["alice"].id, users["bob"].id, content)
    assert "content" in exc.value.errors
    assert message_crud.get_messages_by_user(db_session, users["alice"].id) == []


def test_send_trims_content(db_session, users):
    message = messaging_service.send_message(db_session, users["alice"].id, users["bob"].id, "  hello  ")
    assert message.content == "hello"


def test_send_rejects_overlong_content(db_session, users):
    with pytest.raises(ValidationError):
        messaging_service.send_message(db_session, users["alice"].id, users["bob"].id, "x" * 5001)


def test_send_to_self_or_unknown_user(db_session, users):
    with pytest.raises(ValidationError):
        messaging_service.send_message(db_session, users["alice"].id, users["alice"].id, "hi")
    with pytest.raises(NotFoundError):
        messaging_service.send_message(db_session, users["alice"].id, 999, "hi")


# ======================
# READ RECEIPTS
# ======================

def test_only_receiver_can_mark_read(db_session, users):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    message = messaging_service.send_message(db_session, alice.id, bob.id, "hi")

    with pytest.raises(AuthorizationError):
        messaging_service.mark_read(db_session, message.id, alice.id)
    with pytest.raises(AuthorizationError):
        messaging_service.mark_read(db_session, message.id, carol.id)

    marked = messaging_service.mark_read(db_session, message.id, bob.id)
    assert marked.is_read is True
    assert messaging_service.get_unread_count(db_session, bob.id) == 0

    # Marking again is a no-op
    assert messaging_service.mark_read(db_session, message.id, bob.id).is_read is True


def test_mark_read_unknown_message(db_session, users):
    with pytest.raises(NotFoundError):
        messaging_service.mark_read(db_session, 42, users["bob"].id)


# ======================
# STORE-BACKED VIEWS
# ======================

def test_user_conversations_report_unread_counts(db_session, users):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    message_crud.create_message(db_session, sender_id=bob.id, receiver_id=alice.id, content="one", created_at=T0)
    message_crud.create_message(
        db_session, sender_id=bob.id, receiver_id=alice.id, content="two", created_at=T0 + timedelta(minutes=1)
    )
    message_crud.create_message(
        db_session, sender_id=alice.id, receiver_id=carol.id, content="three", created_at=T0 + timedelta(minutes=2)
    )
    db_session.commit()

    summaries = messaging_service.list_user_conversations(db_session, alice.id)

    assert [s["counterpart_id"] for s in summaries] == [carol.id, bob.id]
    carol_summary, bob_summary = summaries
    assert carol_summary["is_unread"] is False
    assert carol_summary["unread_count"] == 0
    assert bob_summary["last_message"].content == "two"
    assert bob_summary["is_unread"] is True
    assert bob_summary["unread_count"] == 2


def test_conversation_thread_is_oldest_first(db_session, users):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    message_crud.create_message(
        db_session, sender_id=bob.id, receiver_id=alice.id, content="later", created_at=T0 + timedelta(minutes=5)
    )
    message_crud.create_message(db_session, sender_id=alice.id, receiver_id=bob.id, content="earlier", created_at=T0)
    message_crud.create_message(db_session, sender_id=carol.id, receiver_id=alice.id, content="other", created_at=T0)
    db_session.commit()

    thread = messaging_service.get_conversation(db_session, alice.id, bob.id)
    assert [m.content for m in thread] == ["earlier", "later"]
