from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from atelier.core.security import create_access_token
from atelier.modules.users.service import UsersService


logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UsersService(db)

    def login(self, email: str, password: str) -> str | None:
        user = self.users.authenticate(email, password)
        if not user or not user.is_active:
            logger.info("Rejected login for %s", email)
            return None
        return create_access_token(subject=user.id)
