from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.database import get_db
from skillexchange.schemas.skill import Skill, SkillCreate, SkillUpdate
from skillexchange.services import skill_service
from skillexchange.utils.security import get_current_user

router = APIRouter(prefix="/api/skills", tags=["Skills"])


# ======================
# GET: All skills (public browse list)
# ======================
@router.get("", response_model=List[Skill])
def get_all_skills(db: Session = Depends(get_db)):
    return skill_service.list_all_skills(db)


# ======================
# GET: My skills (teaching / learning)
# ======================
@router.get("/teaching", response_model=List[Skill])
def get_teaching_skills(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return skill_service.list_user_skills(db, current_user.id, is_teaching=True)


@router.get("/learning", response_model=List[Skill])
def get_learning_skills(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return skill_service.list_user_skills(db, current_user.id, is_teaching=False)


@router.get("/{skill_id}", response_model=Skill)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return skill_service.get_skill(db, skill_id)


# ======================
# POST / PUT / DELETE: Owner-managed skills
# ======================
@router.post("", response_model=Skill, status_code=status.HTTP_201_CREATED)
def create_skill(
    skill: SkillCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return skill_service.create_skill(db, current_user.id, skill)


@router.put("/{skill_id}", response_model=Skill)
def update_skill(
    skill_id: int,
    patch: SkillUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return skill_service.update_skill(db, skill_id, current_user.id, patch)


@router.delete("/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(
    skill_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    skill_service.delete_skill(db, skill_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
