import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.database import get_db
from campus_wellness.models.mood_log import MoodLog
from campus_wellness.routes.dependencies import ensure_database_ready, store_error

router = APIRouter(tags=['mood'])

logger = logging.getLogger(__name__)

MAX_EMOTIONAL_STATUS_LENGTH = 100


class CreateMoodLogRequest(BaseModel):
    std_id: int | None = None
    log_date: date | None = None
    mood_rating: int | None = Field(default=None, ge=1, le=5)
    stress_level: int | None = Field(default=None, ge=1, le=3)
    energy_level: int | None = Field(default=None, ge=1, le=5)
    sleep_quantity: int | None = Field(default=None, ge=1, le=3)
    emotional_status: str | None = Field(default=None, max_length=MAX_EMOTIONAL_STATUS_LENGTH)
    notes: str | None = None


class MoodLogResponse(BaseModel):
    log_id: int
    std_id: int
    log_date: date
    mood_rating: int | None = None
    stress_level: int | None = None
    energy_level: int | None = None
    sleep_quantity: int | None = None
    emotional_status: str | None = None
    notes: str | None = None

    class Config:
        from_attributes = True


@router.post('', status_code=status.HTTP_201_CREATED)
def create_mood_log(data: CreateMoodLogRequest, db: Session = Depends(get_db)):
    if not data.std_id or data.log_date is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='std_id and log_date are required',
        )

    ensure_database_ready()

    try:
        mood_log = MoodLog(**data.model_dump())
        db.add(mood_log)
        db.commit()
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc

    logger.info('Saved mood log %s for student %s on %s', mood_log.log_id, data.std_id, data.log_date)
    return {'message': 'Mood log saved'}


@router.get('/{std_id}', response_model=list[MoodLogResponse])
def list_mood_logs(std_id: int, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return db.query(MoodLog).filter(
            MoodLog.std_id == std_id,
        ).order_by(MoodLog.log_date.desc(), MoodLog.log_id.desc()).all()
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc
