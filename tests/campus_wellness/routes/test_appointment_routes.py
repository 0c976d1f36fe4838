from datetime import date, time

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from campus_wellness.models.appointment import Appointment
from campus_wellness.models.notification import Notification
from campus_wellness.routes.appointment_routes import (
    CreateAppointmentRequest,
    UpdateAppointmentStatusRequest,
    create_appointment,
    list_student_appointments,
    list_todays_appointments,
    update_appointment_status,
)
from campus_wellness.services import appointment_service


@pytest.fixture(autouse=True)
def skip_schema_check(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr('campus_wellness.routes.appointment_routes.ensure_database_ready', lambda: None)


def _request(**overrides) -> CreateAppointmentRequest:
    fields = {
        'std_id': 101,
        'appointment_type': 'Counselor',
        'professional_name': 'Dr. Rahman',
        'appointment_date': '2026-01-10',
        'appointment_time': '14:00',
        'reason': 'Exam stress',
    }
    fields.update(overrides)
    return CreateAppointmentRequest(**fields)


def test_create_appointment_request_parses_dates_and_blank_reason() -> None:
    request = _request(reason='   ')

    assert request.appointment_date == date(2026, 1, 10)
    assert request.appointment_time == time(14, 0)
    assert request.reason is None


def test_create_appointment_returns_created_message(wellness_db) -> None:
    response = create_appointment(data=_request(), db=wellness_db)

    assert response['message'] == 'Appointment created'
    appointment = wellness_db.get(Appointment, response['appoint_id'])
    assert appointment.status == 'Pending'
    assert wellness_db.query(Notification).filter(Notification.std_id == 101).count() == 1


def test_create_appointment_missing_time_returns_400(wellness_db) -> None:
    with pytest.raises(HTTPException) as exception_info:
        create_appointment(data=_request(appointment_time=None), db=wellness_db)

    assert exception_info.value.status_code == 400
    assert 'appointment_time' in exception_info.value.detail
    assert wellness_db.query(Appointment).count() == 0
    assert wellness_db.query(Notification).count() == 0


def test_create_appointment_reports_store_failure_as_500(wellness_db, monkeypatch) -> None:
    def failing_create(*_args, **_kwargs):
        raise OperationalError('INSERT INTO Appointment', {}, Exception('database is locked'))

    monkeypatch.setattr(appointment_service, 'create_appointment', failing_create)

    with pytest.raises(HTTPException) as exception_info:
        create_appointment(data=_request(), db=wellness_db)

    assert exception_info.value.status_code == 500
    assert exception_info.value.detail == 'database is locked'


def test_list_student_appointments_returns_newest_first(wellness_db) -> None:
    create_appointment(data=_request(appointment_date='2026-01-10'), db=wellness_db)
    create_appointment(data=_request(appointment_date='2026-02-01'), db=wellness_db)

    appointments = list_student_appointments(std_id=101, db=wellness_db)

    assert [a.appointment_date for a in appointments] == [date(2026, 2, 1), date(2026, 1, 10)]


def test_list_todays_appointments_only_includes_today(wellness_db) -> None:
    today = date.today().isoformat()
    create_appointment(data=_request(appointment_date=today, appointment_time='16:00'), db=wellness_db)
    create_appointment(data=_request(std_id=202, appointment_date=today, appointment_time='09:00'), db=wellness_db)
    create_appointment(data=_request(appointment_date='2020-01-01'), db=wellness_db)

    appointments = list_todays_appointments(db=wellness_db)

    assert [(a.std_id, a.appointment_time) for a in appointments] == [(202, time(9, 0)), (101, time(16, 0))]


def test_update_appointment_status_approves_booking(wellness_db) -> None:
    appoint_id = create_appointment(data=_request(), db=wellness_db)['appoint_id']

    response = update_appointment_status(
        appoint_id=appoint_id,
        data=UpdateAppointmentStatusRequest(status='Approved'),
        db=wellness_db,
    )

    assert response == {'message': 'Appointment status updated'}
    assert wellness_db.get(Appointment, appoint_id).status == 'Approved'


@pytest.mark.parametrize('new_status', ['Pending', 'Done', None])
def test_update_appointment_status_rejects_invalid_status(wellness_db, new_status) -> None:
    appoint_id = create_appointment(data=_request(), db=wellness_db)['appoint_id']

    with pytest.raises(HTTPException) as exception_info:
        update_appointment_status(
            appoint_id=appoint_id,
            data=UpdateAppointmentStatusRequest(status=new_status),
            db=wellness_db,
        )

    assert exception_info.value.status_code == 400
    assert wellness_db.get(Appointment, appoint_id).status == 'Pending'


def test_update_appointment_status_returns_409_for_final_state(wellness_db) -> None:
    appoint_id = create_appointment(data=_request(), db=wellness_db)['appoint_id']
    update_appointment_status(
        appoint_id=appoint_id,
        data=UpdateAppointmentStatusRequest(status='Completed'),
        db=wellness_db,
    )

    with pytest.raises(HTTPException) as exception_info:
        update_appointment_status(
            appoint_id=appoint_id,
            data=UpdateAppointmentStatusRequest(status='Cancelled'),
            db=wellness_db,
        )

    assert exception_info.value.status_code == 409
    assert exception_info.value.detail == 'Cannot change appointment status from Completed to Cancelled.'


def test_update_appointment_status_for_unknown_id_still_succeeds(wellness_db) -> None:
    response = update_appointment_status(
        appoint_id=404,
        data=UpdateAppointmentStatusRequest(status='Approved'),
        db=wellness_db,
    )

    assert response == {'message': 'Appointment status updated'}
