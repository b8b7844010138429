from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from unfold_india.core.config import get_settings


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password[:72], hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password[:72])


def _create_token(
    subject: str, version: int, expires_delta: timedelta, token_type: str
) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "ver": version,
        "type": token_type,
        "exp": expire,
    }
    return jwt.encode(
        to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
    )


def create_access_token(subject: str, version: int = 0) -> str:
    settings = get_settings()
    return _create_token(
        subject,
        version,
        timedelta(minutes=settings.access_token_expire_minutes),
        token_type=ACCESS_TOKEN,
    )


def create_refresh_token(subject: str, version: int = 0) -> str:
    settings = get_settings()
    return _create_token(
        subject,
        version,
        timedelta(minutes=settings.refresh_token_expire_minutes),
        token_type=REFRESH_TOKEN,
    )


def decode_token(token: str) -> Dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
