from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.crud import user as user_crud
from skillexchange.database import commit_or_raise, get_db
from skillexchange.errors import AuthenticationError, ValidationError
from skillexchange.schemas.auth import LoginRequest, Token
from skillexchange.schemas.user import UserPublic, UserRegister
from skillexchange.utils.security import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_password_hash,
)

router = APIRouter(prefix="/api", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user account"""
    username = user_data.username.strip()
    if user_crud.get_user_by_username(db, username):
        raise ValidationError("Username already exists", {"username": "Username already exists"})

    new_user = user_crud.create_user(
        db,
        username=username,
        password_hash=get_password_hash(user_data.password),
        full_name=user_data.full_name.strip(),
        bio=user_data.bio,
        profile_image=user_data.profile_image,
    )
    commit_or_raise(db, "register user")
    db.refresh(new_user)
    return new_user


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return access token"""
    user = authenticate_user(db, credentials.username.strip(), credentials.password)
    if not user:
        raise AuthenticationError("Invalid username or password")

    access_token = create_access_token(data={"sub": user.username})
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/user", response_model=UserPublic)
def read_current_user(current_user: models.User = Depends(get_current_user)):
    return current_user
