"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import UserRole


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    name: Optional[str] = Field(None, max_length=255)


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    role: UserRole = Field(UserRole.STUDENT, description="'teacher' or 'student'")


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


# Response schemas
class UserResponse(UserBase):
    """Schema for user data in API responses (no sensitive data)."""
    id: int
    role: UserRole
    school_id: Optional[int]
    is_admin: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects


# Token schemas
class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
