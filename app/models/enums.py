"""Enumerations shared by models and schemas."""

import enum


class UserRole(str, enum.Enum):
    """Account roles."""
    TEACHER = "teacher"
    STUDENT = "student"


class BadgeCategory(str, enum.Enum):
    """Category badges awarded for covering a roster of activity types."""
    TEAM = "team"
    OUTDOOR = "outdoor"
