"""
Training session endpoints.

One session per day, addressed by date.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.training_session import TrainingSessionCreate, TrainingSessionResponse
from app.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.put("/{date}", summary="Log or replace the training session of a date.",
            response_model=TrainingSessionResponse, )
def upsert_session(date: datetime.date, data: TrainingSessionCreate, response: Response,
                   db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """Upsert: creates the entry if it doesn't exist, replaces it if it does."""
    service = TrainingSessionService(db)
    entry, created = service.upsert(user.id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List training sessions in a date range (default: current month).",
            response_model=list[TrainingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    return service.get_range(user.id, start, end)


@router.get("/{date}", summary="Get the training session of a date.", response_model=TrainingSessionResponse, )
def get_session(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    return service.get_by_date(user.id, date)


@router.delete("/{date}", summary="Delete the training session of a date.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    service.delete_by_date(user.id, date)
