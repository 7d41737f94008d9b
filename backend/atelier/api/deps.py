from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from atelier.core.config import settings
from atelier.core.database import get_db
from atelier.core.errors import InvalidQuery
from atelier.core.security import decode_access_token
from atelier.modules.users.models import User
from atelier.modules.users.repository import UsersRepository


bearer_scheme = HTTPBearer(auto_error=False)

# Largest offset or page size every supported driver can bind.
MAX_ROWS = 2**31 - 1


def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> User:
    if credentials is None or not credentials.scheme.lower() == "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    sub = payload.get("sub")
    if not sub:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")

    user = UsersRepository(db).get_by_id(sub)
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Inactive or missing user")
    return user


def get_owner_id(current_user: Annotated[User, Depends(get_current_user)]) -> str:
    return current_user.id


@dataclass
class PageParams:
    skip: int
    limit: int
    search: str | None


def get_page_params(
    page: Annotated[int, Query(description="Page number, 1-based")] = 1,
    limit: Annotated[int | None, Query(description="Items per page")] = None,
    search: Annotated[str | None, Query(description="Case-insensitive search term")] = None,
) -> PageParams:
    page = max(1, page)
    per_page = max(1, limit if limit is not None else settings.DEFAULT_PAGE_SIZE)
    if per_page > MAX_ROWS or (page - 1) * per_page > MAX_ROWS:
        raise InvalidQuery(f"page {page} with limit {per_page} is out of range", code="invalid_page")
    return PageParams(skip=(page - 1) * per_page, limit=per_page, search=search or None)


def split_fields(fields: str | None, default: tuple[str, ...]) -> list[str]:
    if not fields:
        return list(default)
    return [name.strip() for name in fields.split(",") if name.strip()]


DbDep = Annotated[Session, Depends(get_db)]
OwnerDep = Annotated[str, Depends(get_owner_id)]
PageDep = Annotated[PageParams, Depends(get_page_params)]
