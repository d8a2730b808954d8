"""
Statistics schemas.

Outputs of the aggregation functions in :mod:`app.stats` and the
responses of the stats endpoints.  ``avg_enjoyment`` is always the mean
intensity rounded to 2 decimals, ``0`` for an empty bucket.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from app.models.enums import BadgeCategory


class StudentStats(BaseModel):
    """Totals of one student over a session set."""

    total_minutes: Union[int, float] = Field(0, ge=0)
    sessions: int = Field(0, ge=0)
    avg_enjoyment: float = Field(0.0, description="Mean intensity, 2 decimals")


class ActivityAgg(BaseModel):
    """Totals of one activity type over a session set."""

    activity: str
    sessions: int = Field(0, ge=0)
    total_minutes: Union[int, float] = Field(0, ge=0)
    avg_enjoyment: float = 0.0


class SessionTotals(BaseModel):
    """Headline numbers of a session set (group or student)."""

    sessions: int = 0
    total_minutes: Union[int, float] = 0
    avg_enjoyment: float = 0.0
    distinct_students: int = 0


class RewardState(BaseModel):
    """Position of a minute total on the reward ladder."""

    total_minutes: Union[int, float]
    thresholds: list[int] = Field(..., description="The ladder evaluated, ascending")
    achieved_thresholds: list[int] = Field(..., description="Every threshold <= total_minutes, ascending")
    next_threshold: Optional[int] = Field(None, description="Smallest threshold > total_minutes, None at the top")


class CategoryBadge(BaseModel):
    """Progress towards a category badge.

    ``completed_types`` keeps the roster order of ``required_types``.
    """

    category: Optional[BadgeCategory] = None
    required_types: list[str]
    completed_types: list[str]
    achieved: bool


class StudentRewards(BaseModel):
    """All-time totals, reward ladder and badges of one student."""

    totals: SessionTotals
    rewards: RewardState
    badges: list[CategoryBadge]


# ----------------------------------------------------------------------
# Endpoint responses
# ----------------------------------------------------------------------


class StudentSummary(BaseModel):
    """Student identity shown next to statistics."""

    id: int
    name: Optional[str]
    email: str

    class Config:
        from_attributes = True


class GroupTotalsResponse(BaseModel):
    """Everything the group statistics view needs."""

    group_id: int
    group_name: str
    students: list[StudentSummary]
    stats_by_student: dict[int, StudentStats]
    top_activities: list[ActivityAgg]
    totals: SessionTotals


class StudentRewardsResponse(StudentRewards):
    """Rewards of one student."""

    student_id: int


class ActivityResponse(BaseModel):
    """Entry of the activity catalogue."""

    activity_id: str
    display_name: str
