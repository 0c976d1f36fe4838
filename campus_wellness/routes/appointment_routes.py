from datetime import date, time

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, field_validator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.core.errors import WellnessError
from campus_wellness.database import get_db
from campus_wellness.routes.dependencies import domain_error, ensure_database_ready, store_error
from campus_wellness.services import appointment_service

router = APIRouter(tags=['appointments'])

MAX_REASON_LENGTH = 1000


class CreateAppointmentRequest(BaseModel):
    std_id: int | None = None
    appointment_type: str | None = None
    professional_name: str | None = None
    appointment_date: date | None = None
    appointment_time: time | None = None
    reason: str | None = None

    @field_validator('reason')
    @classmethod
    def validate_reason(cls, value: str | None) -> str | None:
        if value is None:
            return None

        normalized = value.strip()
        if not normalized:
            return None

        if len(normalized) > MAX_REASON_LENGTH:
            raise ValueError(f'Reason must be {MAX_REASON_LENGTH} characters or fewer.')

        return normalized


class UpdateAppointmentStatusRequest(BaseModel):
    status: str | None = None
    session_note: str | None = None


class AppointmentResponse(BaseModel):
    appoint_id: int
    std_id: int
    appointment_type: str
    professional_name: str
    appointment_date: date
    appointment_time: time
    status: str
    reason: str | None = None
    session_note: str | None = None

    class Config:
        from_attributes = True


@router.post('/appointments', status_code=status.HTTP_201_CREATED)
def create_appointment(data: CreateAppointmentRequest, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        appoint_id = appointment_service.create_appointment(
            db,
            std_id=data.std_id,
            appointment_type=data.appointment_type,
            professional_name=data.professional_name,
            appointment_date=data.appointment_date,
            appointment_time=data.appointment_time,
            reason=data.reason,
        )
    except WellnessError as exc:
        raise domain_error(exc) from exc
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc

    return {'message': 'Appointment created', 'appoint_id': appoint_id}


@router.get('/appointments/{std_id}', response_model=list[AppointmentResponse])
def list_student_appointments(std_id: int, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return appointment_service.list_appointments_for_student(db, std_id)
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.get('/professional/today', response_model=list[AppointmentResponse])
def list_todays_appointments(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return appointment_service.list_appointments_for_day(db, date.today())
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.put('/appointments/status/{appoint_id}')
def update_appointment_status(
    appoint_id: int,
    data: UpdateAppointmentStatusRequest,
    db: Session = Depends(get_db),
):
    try:
        appointment_service.validate_requested_status(data.status)
    except WellnessError as exc:
        raise domain_error(exc) from exc

    ensure_database_ready()

    try:
        appointment_service.update_appointment_status(
            db,
            appoint_id,
            data.status,
            session_note=data.session_note,
        )
    except WellnessError as exc:
        raise domain_error(exc) from exc
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc

    return {'message': 'Appointment status updated'}
