from datetime import date

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, StrictInt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.core.errors import WellnessError
from campus_wellness.database import get_db
from campus_wellness.routes.dependencies import domain_error, ensure_database_ready, store_error
from campus_wellness.services import habit_log_service

router = APIRouter(tags=['habits'])


class HabitResponse(BaseModel):
    habit_id: int
    habit_name: str
    category: str | None = None

    class Config:
        from_attributes = True


class HabitLogEntryResponse(BaseModel):
    habit_id: int
    completed: int

    class Config:
        from_attributes = True


class SaveHabitLogRequest(BaseModel):
    std_id: int | None = None
    habit_ids: list[StrictInt] | None = None
    log_date: date | None = None


@router.get('/habits', response_model=list[HabitResponse])
def list_habits(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return habit_log_service.get_habit_catalog(db)
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.get('/habit-log/{std_id}', response_model=list[HabitLogEntryResponse])
def get_habit_log(
    std_id: int,
    log_date: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    try:
        return habit_log_service.get_completed_habits(db, std_id, log_date)
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.post('/habit-log')
def save_habit_log(data: SaveHabitLogRequest, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        habit_log_service.set_completed_habits(db, data.std_id, data.log_date, data.habit_ids)
    except WellnessError as exc:
        raise domain_error(exc) from exc
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc

    return {'message': 'Habit log saved'}
