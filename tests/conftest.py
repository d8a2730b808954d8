"""Shared pytest fixtures.

Settings are read at import time, so the test environment is set before
anything from ``app`` is imported.  Every test gets a fresh in-memory
SQLite database.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.security import create_access_token, get_password_hash
from app.db.session import get_db
from app.main import app as fastapi_app
from app.models.enums import UserRole
from app.models.school import School
from app.models.user import User


# ======================================================================
# Database
# ======================================================================


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def _get_db():
        yield session

    fastapi_app.dependency_overrides[get_db] = _get_db
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


# ======================================================================
# Users and schools
# ======================================================================


@pytest.fixture
def make_user(session):
    """Factory: ``make_user(email, role=..., school=...)``."""

    def _make(email: str, role: UserRole = UserRole.STUDENT, school: School | None = None,
              name: str | None = None, password: str = "password123", ) -> User:
        user = User(email=email, hashed_password=get_password_hash(password), name=name or email.split("@")[0],
                    role=role, school_id=school.id if school else None, )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def school(session) -> School:
    school = School(name="Instituto Central", location="Madrid", invite_code="ABC123")
    session.add(school)
    session.commit()
    session.refresh(school)
    return school


@pytest.fixture
def teacher(make_user, school) -> User:
    return make_user("teacher@schoolfit.es", role=UserRole.TEACHER, school=school, name="Ms Teacher")


@pytest.fixture
def student(make_user, school) -> User:
    return make_user("ana@schoolfit.es", school=school, name="Ana")


@pytest.fixture
def auth_headers():
    """Factory: bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token({ "sub": user.email })
        return { "Authorization": f"Bearer {token}" }

    return _headers
