"""Appointment booking and the status workflow professionals drive.

New bookings always start as Pending. Professionals then move them along::

    Pending  -> Approved | Cancelled | Completed
    Approved -> Cancelled | Completed

Cancelled and Completed are final. Pending can never be set through a status
update, and re-applying the current status is a no-op.
"""

import logging
from datetime import date, time

from sqlalchemy.orm import Session

from campus_wellness.core.errors import InvalidTransitionError, ValidationError
from campus_wellness.models.appointment import Appointment, AppointmentStatus
from campus_wellness.models.notification import Notification

logger = logging.getLogger(__name__)

SETTABLE_STATUSES = (
    AppointmentStatus.APPROVED.value,
    AppointmentStatus.CANCELLED.value,
    AppointmentStatus.COMPLETED.value,
)
ALLOWED_TRANSITIONS = {
    AppointmentStatus.PENDING.value: frozenset(SETTABLE_STATUSES),
    AppointmentStatus.APPROVED.value: frozenset({
        AppointmentStatus.CANCELLED.value,
        AppointmentStatus.COMPLETED.value,
    }),
    AppointmentStatus.CANCELLED.value: frozenset(),
    AppointmentStatus.COMPLETED.value: frozenset(),
}


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _format_time(value: time) -> str:
    return value.strftime('%H:%M') if value.second == 0 else value.strftime('%H:%M:%S')


def build_booking_message(professional_name: str, appointment_date: date, appointment_time: time) -> str:
    return (
        f'Appointment booked with {professional_name} on '
        f'{appointment_date.isoformat()} at {_format_time(appointment_time)}'
    )


def build_booking_notification(
    std_id: int,
    professional_name: str,
    appointment_date: date,
    appointment_time: time,
) -> Notification:
    return Notification(
        std_id=std_id,
        msg=build_booking_message(professional_name, appointment_date, appointment_time),
        is_read=0,
        appointment_reminder=1,
        mood_reminder=0,
        habit_reminder=0,
    )


def create_appointment(
    db: Session,
    std_id: int | None,
    appointment_type: str | None,
    professional_name: str | None,
    appointment_date: date | None,
    appointment_time: time | None,
    reason: str | None = None,
) -> int:
    """Book a Pending appointment and notify the student, in one transaction.

    Returns the new ``appoint_id``. Raises ``ValidationError`` without
    touching the store when a required field is missing.
    """
    required = {
        'std_id': std_id,
        'appointment_type': appointment_type,
        'professional_name': professional_name,
        'appointment_date': appointment_date,
        'appointment_time': appointment_time,
    }
    missing = [name for name, value in required.items() if _is_blank(value)]
    if missing:
        raise ValidationError(f'Missing required appointment fields: {", ".join(missing)}')

    professional_name = professional_name.strip()
    appointment = Appointment(
        std_id=std_id,
        appointment_type=appointment_type.strip(),
        professional_name=professional_name,
        appointment_date=appointment_date,
        appointment_time=appointment_time,
        reason=None if _is_blank(reason) else reason.strip(),
        status=AppointmentStatus.PENDING.value,
    )

    try:
        db.add(appointment)
        db.flush()
        db.add(build_booking_notification(std_id, professional_name, appointment_date, appointment_time))
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        'Booked appointment %s for student %s with %s on %s',
        appointment.appoint_id,
        std_id,
        professional_name,
        appointment_date,
    )
    return appointment.appoint_id


def list_appointments_for_student(db: Session, std_id: int) -> list[Appointment]:
    return db.query(Appointment).filter(
        Appointment.std_id == std_id,
    ).order_by(
        Appointment.appointment_date.desc(),
        Appointment.appointment_time.desc(),
    ).all()


def list_appointments_for_day(db: Session, day: date | None = None) -> list[Appointment]:
    day = day or date.today()
    return db.query(Appointment).filter(
        Appointment.appointment_date == day,
    ).order_by(Appointment.appointment_time.asc()).all()


def validate_requested_status(new_status) -> str:
    if not isinstance(new_status, str) or new_status not in SETTABLE_STATUSES:
        raise ValidationError(f'Invalid status value. Expected one of: {", ".join(SETTABLE_STATUSES)}')
    return new_status


def check_transition(current_status: str, new_status: str) -> None:
    if current_status == new_status:
        return
    if new_status not in ALLOWED_TRANSITIONS.get(current_status, frozenset()):
        raise InvalidTransitionError(current_status, new_status)


def update_appointment_status(
    db: Session,
    appoint_id: int,
    new_status,
    session_note: str | None = None,
) -> Appointment | None:
    """Move an appointment to ``new_status``.

    Returns the updated appointment, or ``None`` when no appointment has that
    id (the call still succeeds and nothing changes).
    """
    new_status = validate_requested_status(new_status)

    try:
        appointment = db.query(Appointment).filter(
            Appointment.appoint_id == appoint_id,
        ).with_for_update().first()

        if appointment is None:
            db.rollback()
            logger.warning('Status update for unknown appointment %s ignored', appoint_id)
            return None

        check_transition(appointment.status, new_status)

        previous_status = appointment.status
        appointment.status = new_status
        if not _is_blank(session_note):
            appointment.session_note = session_note.strip()
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(appointment)
    logger.info('Appointment %s moved from %s to %s', appoint_id, previous_status, new_status)
    return appointment
