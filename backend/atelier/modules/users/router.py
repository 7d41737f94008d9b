from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from atelier.api.deps import get_current_user
from atelier.core.database import get_db
from .models import User
from .schemas import UserCreate, UserRead
from .service import UsersService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(data: UserCreate, db: Annotated[Session, Depends(get_db)]):
    logger.info("Registering user %s", data.email)
    user = UsersService(db).register_user(data)
    logger.info("User %s registered with id %s", user.email, user.id)
    return user


@router.get("/me", response_model=UserRead)
def read_me(current: Annotated[User, Depends(get_current_user)]):
    return current
