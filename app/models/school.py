"""
School database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class School(SQLModel, table=True):
    """A school.  Users join it by id or by its ``invite_code``."""

    __tablename__ = "schools"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255, index=True)
    location: Optional[str] = Field(default=None, max_length=255)
    invite_code: str = Field(nullable=False, max_length=6, unique=True, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
