from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from skillexchange.models.exchange import SkillExchange


def create_exchange(db: Session, *, teacher_id: int, student_id: int, teacher_skill_id: int) -> SkillExchange:
    exchange = SkillExchange(
        teacher_id=teacher_id,
        student_id=student_id,
        teacher_skill_id=teacher_skill_id,
        status="pending",
    )
    db.add(exchange)
    db.flush()
    return exchange


def get_exchange(db: Session, exchange_id: int) -> Optional[SkillExchange]:
    return db.query(SkillExchange).filter(SkillExchange.id == exchange_id).first()


def get_exchanges_by_user(db: Session, user_id: int) -> List[SkillExchange]:
    return (
        db.query(SkillExchange)
        .filter(or_(SkillExchange.teacher_id == user_id, SkillExchange.student_id == user_id))
        .order_by(SkillExchange.id.asc())
        .all()
    )
