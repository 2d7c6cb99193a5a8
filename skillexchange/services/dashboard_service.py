from sqlalchemy.orm import Session

from skillexchange.crud import exchange as exchange_crud
from skillexchange.crud import skill as skill_crud


def get_dashboard_stats(db: Session, caller_id: int) -> dict:
    teaching_skills = skill_crud.get_skills_by_user(db, caller_id, True)
    learning_skills = skill_crud.get_skills_by_user(db, caller_id, False)
    exchanges = exchange_crud.get_exchanges_by_user(db, caller_id)

    rated = [skill.average_rating for skill in teaching_skills if skill.average_rating is not None]
    average_rating = sum(rated) / len(rated) if rated else None

    return {
        "teaching_skills_count": len(teaching_skills),
        "learning_skills_count": len(learning_skills),
        "active_exchanges_count": sum(1 for ex in exchanges if ex.status == "active"),
        "average_rating": average_rating,
    }
