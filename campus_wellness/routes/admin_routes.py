import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.database import get_db
from campus_wellness.models.appointment import Appointment
from campus_wellness.models.user import Student, User
from campus_wellness.routes.dependencies import ensure_database_ready, store_error

router = APIRouter(tags=['admin'])

logger = logging.getLogger(__name__)

PROFESSIONAL_ROLE = 'professional'


class AdminStatsResponse(BaseModel):
    students: int
    professionals: int
    appointments: int


@router.get('/admin/stats', response_model=AdminStatsResponse)
def get_admin_stats(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return AdminStatsResponse(
            students=db.query(func.count(Student.user_id)).scalar() or 0,
            professionals=db.query(func.count(User.user_id)).filter(
                User.role == PROFESSIONAL_ROLE,
            ).scalar() or 0,
            appointments=db.query(func.count(Appointment.appoint_id)).scalar() or 0,
        )
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.get('/health')
def health_check(db: Session = Depends(get_db)):
    try:
        result = db.execute(text('SELECT 1 AS result')).scalar()
    except SQLAlchemyError as exc:
        logger.exception('Health check could not reach the database')
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'status': 'ERROR', 'message': str(exc)},
        )

    return {'status': 'OK', 'database': 'connected', 'result': result}
