from __future__ import annotations

from sqlalchemy.orm import Session

from atelier.core.errors import InvalidQuery
from atelier.core.security import get_password_hash, verify_password
from .models import User
from .schemas import UserCreate
from .repository import UsersRepository


class UsersService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UsersRepository(db)

    def register_user(self, data: UserCreate) -> User:
        if self.repo.get_by_email(data.email):
            raise InvalidQuery("Email already registered", code="email_taken")
        user = User(
            email=data.email,
            full_name=data.full_name,
            hashed_password=get_password_hash(data.password),
        )
        return self.repo.create(user)

    def authenticate(self, email: str, password: str) -> User | None:
        user = self.repo.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user
