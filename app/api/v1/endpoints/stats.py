"""
Statistics endpoints: group totals, rewards and the activity catalogue.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_teacher, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import ActivityResponse, GroupTotalsResponse, StudentRewardsResponse
from app.services.stats_service import StatsService

router = APIRouter()


@router.get(
    "/groups/{group_id}",
    summary="Per-student stats, top activities and totals of a group.",
    response_model=GroupTotalsResponse,
)
def get_group_totals(
    group_id: int,
    db: Session = Depends(get_db),
    teacher: User = Depends(get_current_teacher),
):
    return StatsService(db).group_totals(teacher, group_id)


@router.get(
    "/rewards",
    summary="Reward ladder and category badges of the current user.",
    response_model=StudentRewardsResponse,
)
def get_my_rewards(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return StatsService(db).student_rewards(user)


@router.get(
    "/rewards/{student_id}",
    summary="Reward ladder and category badges of a student (teachers).",
    response_model=StudentRewardsResponse,
)
def get_student_rewards(
    student_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return StatsService(db).student_rewards(user, student_id)


@router.get(
    "/activities",
    summary="List loggable activity types.",
    response_model=list[ActivityResponse],
)
def list_activities():
    return StatsService.activities()
