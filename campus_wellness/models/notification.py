"""Notification model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, SmallInteger, String, func
from campus_wellness.database import Base


class Notification(Base):
    """A message shown in a student's notification list."""
    __tablename__ = "Notification"
    __table_args__ = (
        Index("idx_notification_student", "std_id"),
    )

    n_id = Column(Integer, primary_key=True, autoincrement=True)
    std_id = Column(Integer, ForeignKey("Student.std_id"), nullable=False)
    msg = Column(String(255), nullable=False)
    is_read = Column(SmallInteger, default=0)
    appointment_reminder = Column(SmallInteger, default=0)
    mood_reminder = Column(SmallInteger, default=0)
    habit_reminder = Column(SmallInteger, default=0)
    created_at = Column(DateTime, server_default=func.now())
