"""
Group endpoints.

Teacher group management: groups, members, student reassignment and
recent group sessions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_teacher, get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.group import (GroupCreate, GroupResponse, GroupSessionsResponse, SchoolStudentResponse,
                               StudentAssignment, )
from app.schemas.stats import StudentSummary
from app.services.group_service import GroupService

router = APIRouter()


@router.get("", summary="List the teacher's groups (newest first).", response_model=list[GroupResponse], )
def list_my_groups(db: Session = Depends(get_db), teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.list_my_groups(teacher)


@router.post("", summary="Create a group in the teacher's school.", response_model=GroupResponse,
             status_code=status.HTTP_201_CREATED, )
def create_group(data: GroupCreate, db: Session = Depends(get_db), teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.create_group(teacher, data)


@router.get("/school", summary="List every group of the user's school.", response_model=list[GroupResponse], )
def list_school_groups(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = GroupService(db)
    return service.list_school_groups(user)


@router.get("/students", summary="List school students with their group.",
            response_model=list[SchoolStudentResponse], )
def list_school_students(group_id: Optional[int] = Query(None, description="Only students of this group"),
                         db: Session = Depends(get_db), teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.list_school_students(teacher, group_id)


@router.put("/students/{student_id}", summary="Move a student to a group (or out of all groups).",
            response_model=SchoolStudentResponse, )
def assign_student(student_id: int, data: StudentAssignment, db: Session = Depends(get_db),
                   teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.assign_student(teacher, student_id, data.group_id)


@router.get("/{group_id}/members", summary="List the students of a group.", response_model=list[StudentSummary], )
def get_members(group_id: int, db: Session = Depends(get_db), teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.get_members(teacher, group_id)


@router.get("/{group_id}/sessions", summary="Recent sessions of a group.", response_model=GroupSessionsResponse, )
def get_recent_sessions(group_id: int,
                        days: Optional[int] = Query(None, ge=1, le=366, description="Window in days (default 60)"),
                        db: Session = Depends(get_db), teacher: User = Depends(get_current_teacher), ):
    service = GroupService(db)
    return service.recent_sessions(teacher, group_id, days)
