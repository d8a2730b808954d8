"""
School endpoints.

Search, create and join schools.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.school import SchoolCreate, SchoolJoinByCode, SchoolResponse
from app.schemas.user import UserResponse
from app.services.school_service import SchoolService

router = APIRouter()


@router.get("", summary="Search schools by name or invite code.", response_model=list[SchoolResponse], )
def search_schools(q: str = Query("", max_length=255, description="Search term (min 3 characters)"),
                   db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SchoolService(db)
    return service.search(q)


@router.post("", summary="Create a school and join it as admin.", response_model=SchoolResponse,
             status_code=status.HTTP_201_CREATED, )
def create_school(data: SchoolCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SchoolService(db)
    return service.create(user, data)


@router.post("/join", summary="Join a school by invite code.", response_model=UserResponse, )
def join_school_by_code(data: SchoolJoinByCode, db: Session = Depends(get_db),
                        user: User = Depends(get_current_user), ):
    service = SchoolService(db)
    return service.join_by_code(user, data.invite_code)


@router.post("/{school_id}/join", summary="Join a school.", response_model=UserResponse, )
def join_school(school_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SchoolService(db)
    return service.join(user, school_id)
