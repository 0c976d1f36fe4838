"""Appointment model definitions."""

import enum

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Text, Time
from campus_wellness.database import Base


class AppointmentStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class Appointment(Base):
    """Represents a booked session with a wellness professional."""
    __tablename__ = "Appointment"
    __table_args__ = (
        Index("idx_appointment_date_time", "appointment_date", "appointment_time"),
        Index("idx_appointment_student", "std_id"),
    )

    appoint_id = Column(Integer, primary_key=True, autoincrement=True)
    std_id = Column(Integer, ForeignKey("Student.std_id"), nullable=False)
    appointment_type = Column(String(50), nullable=False)
    professional_name = Column(String(100), nullable=False)
    appointment_date = Column(Date, nullable=False)
    appointment_time = Column(Time, nullable=False)
    status = Column(String(30), nullable=False, default=AppointmentStatus.PENDING.value)
    reason = Column(Text)
    session_note = Column(Text)
