from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.database import get_db
from campus_wellness.models.notification import Notification
from campus_wellness.routes.dependencies import ensure_database_ready, store_error

router = APIRouter(tags=['notifications'])


class NotificationResponse(BaseModel):
    n_id: int
    std_id: int
    msg: str
    is_read: int
    appointment_reminder: int
    mood_reminder: int
    habit_reminder: int
    created_at: datetime | None = None

    class Config:
        from_attributes = True


@router.get('/{std_id}', response_model=list[NotificationResponse])
def list_notifications(std_id: int, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        return db.query(Notification).filter(
            Notification.std_id == std_id,
        ).order_by(Notification.n_id.desc()).all()
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc


@router.put('/read/{n_id}')
def mark_notification_read(n_id: int, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        db.query(Notification).filter(
            Notification.n_id == n_id,
        ).update({Notification.is_read: 1}, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as exc:
        raise store_error(exc, db) from exc

    return {'message': 'Notification marked as read'}
