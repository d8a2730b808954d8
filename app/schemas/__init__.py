"""Pydantic schemas for request/response validation."""

from app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from app.schemas.school import SchoolCreate, SchoolJoinByCode, SchoolResponse
from app.schemas.training_session import TrainingSessionCreate, TrainingSessionResponse
from app.schemas.group import (
    GroupCreate,
    GroupResponse,
    GroupSessionsResponse,
    SchoolStudentResponse,
    StudentAssignment,
)
from app.schemas.stats import (
    ActivityAgg,
    ActivityResponse,
    CategoryBadge,
    GroupTotalsResponse,
    RewardState,
    SessionTotals,
    StudentRewards,
    StudentRewardsResponse,
    StudentStats,
    StudentSummary,
)

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "SchoolCreate",
    "SchoolJoinByCode",
    "SchoolResponse",
    "TrainingSessionCreate",
    "TrainingSessionResponse",
    "GroupCreate",
    "GroupResponse",
    "GroupSessionsResponse",
    "SchoolStudentResponse",
    "StudentAssignment",
    "ActivityAgg",
    "ActivityResponse",
    "CategoryBadge",
    "GroupTotalsResponse",
    "RewardState",
    "SessionTotals",
    "StudentRewards",
    "StudentRewardsResponse",
    "StudentStats",
    "StudentSummary",
]
