import os

# Settings are read at import time, so the environment must be ready first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUTH_TOKEN_SECRET", "test-secret-0123456789abcdef0123456789abcdef")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from atelier.core.database import build_engine, ensure_core_schema, get_db
from atelier.core.security import create_access_token, get_password_hash
from atelier.main import app
from atelier.modules.users.models import User


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    ensure_core_schema(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def make_user(db, email: str, password: str = "correct-horse", is_active: bool = True) -> User:
    user = User(email=email, hashed_password=get_password_hash(password), is_active=is_active)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def owner(db):
    return make_user(db, "owner@example.com")


@pytest.fixture()
def stranger(db):
    return make_user(db, "stranger@example.com")


@pytest.fixture()
def headers(owner):
    return bearer(owner)


@pytest.fixture()
def stranger_headers(stranger):
    return bearer(stranger)
