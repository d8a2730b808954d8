"""
Training session API schemas.

The activity tag is checked against the activity registry at the
service layer.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TrainingSessionCreate(BaseModel):
    """Schema for logging (or replacing) the session of a day."""

    activity_type: str = Field(..., max_length=50, description="Activity tag, e.g. 'running'")
    duration: int = Field(30, ge=0, le=1440, description="Duration in minutes")
    intensity: int = Field(3, ge=1, le=5, description="Enjoyment rating 1..5")
    notes: Optional[str] = Field(None, max_length=1000, description="Optional session notes")

    @field_validator("notes")
    @classmethod
    def blank_notes_are_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class TrainingSessionResponse(BaseModel):
    """Schema for training session in API responses."""

    id: int
    student_id: int
    group_id: Optional[int]
    date: datetime.date
    activity_type: str
    activity_display_name: str
    duration: int
    intensity: int
    notes: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
