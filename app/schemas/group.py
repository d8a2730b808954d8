"""
Group API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.stats import StudentSummary
from app.schemas.training_session import TrainingSessionResponse


class GroupCreate(BaseModel):
    """Schema for creating a group."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Group name must not be blank")
        return v


class GroupResponse(BaseModel):
    """Schema for group in API responses."""

    id: int
    name: str
    teacher_id: int
    school_id: int
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class StudentAssignment(BaseModel):
    """Move a student to a group of the school, or out of every group (``None``)."""

    group_id: Optional[int] = None


class SchoolStudentResponse(StudentSummary):
    """Student of the school with its current group."""

    group_id: Optional[int] = None


class GroupSessionsResponse(BaseModel):
    """Recent sessions of a group plus the latest one per student."""

    group_id: int
    since: datetime.date
    students: list[StudentSummary]
    sessions: list[TrainingSessionResponse]
    latest_by_student: dict[int, TrainingSessionResponse]
