# app/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Union

from jose import jwt

from app.core.config import settings


def create_access_token(user_id: int, expires_delta: Union[timedelta, None] = None) -> str:
    """
    Issue a bearer token whose subject is the user id.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Union[int, None]:
    # raises jose.JWTError on a bad signature or an expired token
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        return None
    return int(subject)
