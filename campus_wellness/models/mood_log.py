"""Mood log model definitions."""

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, Text
from campus_wellness.database import Base


class MoodLog(Base):
    """Represents one daily mood check-in."""
    __tablename__ = "Mood_log"
    __table_args__ = (
        Index("idx_mood_log_student_date", "std_id", "log_date"),
    )

    log_id = Column(Integer, primary_key=True, autoincrement=True)
    std_id = Column(Integer, ForeignKey("Student.std_id"), nullable=False)
    log_date = Column(Date, nullable=False)
    mood_rating = Column(Integer)
    stress_level = Column(Integer)
    energy_level = Column(Integer)
    sleep_quantity = Column(Integer)
    emotional_status = Column(String(100))
    notes = Column(Text)
