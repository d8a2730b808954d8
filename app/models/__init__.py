"""SQLModel database models."""

from app.models.user import User
from app.models.school import School
from app.models.group import Group, GroupMember
from app.models.training_session import TrainingSession

__all__ = [
    "User",
    "School",
    "Group",
    "GroupMember",
    "TrainingSession",
]
