"""
Training session database model.

One logged activity per student per day.  ``group_id`` records the
group the student belonged to when the session was logged and is moved
along when a teacher reassigns the student.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class TrainingSession(SQLModel, table=True):
    """A single logged exercise session."""

    __tablename__ = "training_sessions"
    __table_args__ = (UniqueConstraint("student_id", "date", name="uq_training_student_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    group_id: Optional[int] = Field(default=None, foreign_key="groups.id", index=True)
    date: datetime.date = Field(nullable=False, index=True)

    activity_type: str = Field(nullable=False, max_length=50, index=True)
    duration: int = Field(default=0, ge=0, nullable=False)  # minutes
    intensity: int = Field(default=3, ge=1, le=5, nullable=False)  # enjoyment 1..5
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
