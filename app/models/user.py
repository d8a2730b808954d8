"""
User database model.

Defines the users table for authentication, role and school affiliation.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from app.models.enums import UserRole


class User(SQLModel, table=True):
    """
    Teacher or student account.

    ``school_id`` is ``NULL`` until the user joins or creates a school.
    ``is_admin`` is set on the user who created the school.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=255)
    role: UserRole = Field(default=UserRole.STUDENT, nullable=False, index=True)
    school_id: Optional[int] = Field(default=None, foreign_key="schools.id", index=True)
    is_admin: bool = Field(default=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_teacher(self) -> bool:
        return self.role == UserRole.TEACHER
