from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext

from .config import settings


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, expires_in: Optional[int] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + timedelta(seconds=expires_in or settings.AUTH_TOKEN_TTL_SECONDS)
    claims: dict[str, Any] = {"sub": subject, "exp": expire, "iat": now}
    return jwt.encode(claims, settings.AUTH_TOKEN_SECRET, algorithm=settings.AUTH_TOKEN_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry; raises ``jwt.InvalidTokenError`` otherwise."""
    return jwt.decode(token, settings.AUTH_TOKEN_SECRET, algorithms=[settings.AUTH_TOKEN_ALGORITHM])
