import logging
from datetime import timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from skillexchange import models
from skillexchange.config import settings
from skillexchange.crud import user as user_crud
from skillexchange.database import get_db
from skillexchange.errors import AuthenticationError
from skillexchange.schemas.auth import TokenData
from skillexchange.utils.clock import utcnow

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


# ==========================
# AUTH CONFIG
# ==========================

# auto_error is off so a missing header goes through the same 401 handler
# as a bad token.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ==========================
# PASSWORDS
# ==========================

def _bcrypt_safe(password: str) -> str:
    raw = password.encode("utf-8")
    if len(raw) <= BCRYPT_MAX_BYTES:
        return password
    return raw[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_bcrypt_safe(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    """Hash with bcrypt, truncating to the 72 bytes bcrypt actually reads."""
    return pwd_context.hash(_bcrypt_safe(password))


# ==========================
# JWT
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {**data, "exp": utcnow() + lifetime}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Read the username out of a bearer token.

    Raises:
        AuthenticationError: If the token is malformed, expired or has no subject
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.info("Rejected access token: %s", exc)
        raise AuthenticationError("Could not validate credentials") from exc

    username = payload.get("sub")
    if not username:
        raise AuthenticationError("Could not validate credentials")
    return TokenData(username=username)


# ==========================
# AUTH HELPERS
# ==========================

def authenticate_user(db: Session, username: str, password: str) -> Optional[models.User]:
    user = user_crud.get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    if not token:
        raise AuthenticationError("Not authenticated")

    token_data = decode_access_token(token)
    user = user_crud.get_user_by_username(db, token_data.username)
    if user is None:
        raise AuthenticationError("Could not validate credentials")
    return user
