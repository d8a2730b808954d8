"""
School API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SchoolCreate(BaseModel):
    """Schema for creating a school."""

    name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("School name must not be blank")
        return v

    @field_validator("location")
    @classmethod
    def blank_location_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class SchoolJoinByCode(BaseModel):
    """Schema for joining a school with its invite code."""

    invite_code: str = Field(..., min_length=6, max_length=6)


class SchoolResponse(BaseModel):
    """Schema for school in API responses."""

    id: int
    name: str
    location: Optional[str]
    invite_code: str
    created_at: datetime.datetime

    class Config:
        from_attributes = True
