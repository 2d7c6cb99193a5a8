# tests/test_exchange_service.py
"""
Skill exchange tests
Requests, status changes and running-average rating propagation
"""

import pytest

from skillexchange.errors import AuthorizationError, NotFoundError, ValidationError
from skillexchange.schemas.exchange import ExchangeUpdate
from skillexchange.services import exchange_service
from skillexchange.services.exchange_service import next_running_rating

from conftest import create_skill


@pytest.fixture
def teaching_skill(db_session, users):
    return create_skill(db_session, users["bob"], name="Guitar", category="music")


@pytest.fixture
def exchange(db_session, users, teaching_skill):
    alice, bob = users["alice"], users["bob"]
    return exchange_service.request_exchange(db_session, alice.id, alice.id, bob.id, teaching_skill.id)


# ======================
# RUNNING AVERAGE
# ======================

def test_first_rating_is_taken_as_is():
    assert next_running_rating(None, 4) == 4


def test_second_rating_is_averaged():
    assert next_running_rating(4, 2) == 3


def test_half_ratings_round_up():
    assert next_running_rating(4, 5) == 5
    assert next_running_rating(1, 2) == 2


def test_running_average_weighs_latest_rating_heavily():
    """Not a true mean: 5, 5, 5, 1 ends at 3"""
    rating = None
    for value in (5, 5, 5, 1):
        rating = next_running_rating(rating, value)
    assert rating == 3


# ======================
# REQUESTS
# ======================

def test_request_creates_pending_exchange(exchange, users, teaching_skill):
    assert exchange.status == "pending"
    assert exchange.student_id == users["alice"].id
    assert exchange.teacher_id == users["bob"].id
    assert exchange.teacher_skill_id == teaching_skill.id
    assert exchange.student_rating is None
    assert exchange.teacher_rating is None


def test_request_must_come_from_the_student(db_session, users, teaching_skill):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    with pytest.raises(AuthorizationError):
        exchange_service.request_exchange(db_session, carol.id, alice.id, bob.id, teaching_skill.id)


def test_request_validates_teacher_and_skill(db_session, users, teaching_skill):
    alice, bob, carol = users["alice"], users["bob"], users["carol"]
    with pytest.raises(ValidationError):
        exchange_service.request_exchange(db_session, bob.id, bob.id, bob.id, teaching_skill.id)
    with pytest.raises(NotFoundError):
        exchange_service.request_exchange(db_session, alice.id, alice.id, 999, teaching_skill.id)
    with pytest.raises(NotFoundError):
        exchange_service.request_exchange(db_session, alice.id, alice.id, bob.id, 999)
    with pytest.raises(ValidationError):
        exchange_service.request_exchange(db_session, alice.id, alice.id, carol.id, teaching_skill.id)


def test_request_rejects_learning_skill(db_session, users):
    alice, bob = users["alice"], users["bob"]
    learning = create_skill(db_session, bob, name="Spanish", category="language", is_teaching=False)
    with pytest.raises(ValidationError) as exc:
        exchange_service.request_exchange(db_session, alice.id, alice.id, bob.id, learning.id)
    assert "teacher_skill_id" in exc.value.errors


def test_exchange_listing_covers_both_roles(db_session, users, exchange):
    assert [e.id for e in exchange_service.list_user_exchanges(db_session, users["alice"].id)] == [exchange.id]
    assert [e.id for e in exchange_service.list_user_exchanges(db_session, users["bob"].id)] == [exchange.id]
    assert exchange_service.list_user_exchanges(db_session, users["carol"].id) == []


# ======================
# STATUS
# ======================

def test_status_moves_forward(db_session, users, exchange):
    bob = users["bob"]
    active = exchange_service.update_exchange(db_session, exchange.id, bob.id, ExchangeUpdate(status="active"))
    assert active.status == "active"
    assert active.updated_at is not None
    completed = exchange_service.update_exchange(db_session, exchange.id, bob.id, ExchangeUpdate(status="completed"))
    assert completed.status == "completed"


def test_status_cannot_move_backwards(db_session, users, exchange):
    alice = users["alice"]
    exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(status="completed"))
    with pytest.raises(ValidationError) as exc:
        exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(status="active"))
    assert "status" in exc.value.errors


def test_unknown_status_is_rejected(db_session, users, exchange):
    with pytest.raises(ValidationError):
        exchange_service.update_exchange(db_session, exchange.id, users["alice"].id, ExchangeUpdate(status="paused"))


def test_outsiders_cannot_update(db_session, users, exchange):
    with pytest.raises(AuthorizationError):
        exchange_service.update_exchange(db_session, exchange.id, users["carol"].id, ExchangeUpdate(status="active"))
    with pytest.raises(NotFoundError):
        exchange_service.update_exchange(db_session, 999, users["alice"].id, ExchangeUpdate(status="active"))


# ======================
# RATINGS
# ======================

def test_student_rating_is_written_by_student_only(db_session, users, exchange):
    with pytest.raises(AuthorizationError, match="Only students can provide student ratings"):
        exchange_service.update_exchange(db_session, exchange.id, users["bob"].id, ExchangeUpdate(student_rating=5))


def test_teacher_rating_is_written_by_teacher_only(db_session, users, exchange):
    with pytest.raises(AuthorizationError, match="Only teachers can provide teacher ratings"):
        exchange_service.update_exchange(db_session, exchange.id, users["alice"].id, ExchangeUpdate(teacher_rating=5))


@pytest.mark.parametrize("rating", [-1, 6])
def test_rating_out_of_range(db_session, users, exchange, rating):
    with pytest.raises(ValidationError):
        exchange_service.update_exchange(
            db_session, exchange.id, users["alice"].id, ExchangeUpdate(student_rating=rating)
        )


def test_zero_rating_counts_as_not_provided(db_session, users, exchange):
    """A 0 rating is dropped, so the rest of the patch still applies"""
    alice = users["alice"]
    updated = exchange_service.update_exchange(
        db_session, exchange.id, alice.id, ExchangeUpdate(student_rating=0, status="active")
    )
    assert updated.status == "active"
    assert updated.student_rating is None

    db_session.refresh(alice)
    assert alice.average_rating is None


def test_zero_rating_skips_role_check(db_session, users, exchange):
    bob = users["bob"]
    updated = exchange_service.update_exchange(db_session, exchange.id, bob.id, ExchangeUpdate(student_rating=0))
    assert updated.student_rating is None


def test_student_rating_updates_student_average(db_session, users, exchange):
    """The student rates 4 and the student's own running average becomes 4"""
    alice, bob = users["alice"], users["bob"]
    updated = exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(student_rating=4))
    assert updated.student_rating == 4

    db_session.refresh(alice)
    db_session.refresh(bob)
    assert alice.average_rating == 4
    assert bob.average_rating is None


def test_teacher_rating_updates_teacher_average(db_session, users, exchange):
    alice, bob = users["alice"], users["bob"]
    exchange_service.update_exchange(db_session, exchange.id, bob.id, ExchangeUpdate(teacher_rating=5))

    db_session.refresh(alice)
    db_session.refresh(bob)
    assert bob.average_rating == 5
    assert alice.average_rating is None


def test_repeated_same_rating_is_not_counted_twice(db_session, users, exchange):
    alice = users["alice"]
    alice.average_rating = 2
    db_session.commit()

    exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(student_rating=4))
    db_session.refresh(alice)
    assert alice.average_rating == 3

    exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(student_rating=4))
    db_session.refresh(alice)
    assert alice.average_rating == 3

    exchange_service.update_exchange(db_session, exchange.id, alice.id, ExchangeUpdate(student_rating=5))
    db_session.refresh(alice)
    assert alice.average_rating == 4
