"""Habit catalog and daily habit log model definitions."""

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, SmallInteger, String
from campus_wellness.database import Base


class Habit(Base):
    """A catalog item a student can mark complete for a day."""
    __tablename__ = "Habit"

    habit_id = Column(Integer, primary_key=True, autoincrement=True)
    habit_name = Column(String(100), nullable=False)
    category = Column(String(100))


class HabitLog(Base):
    """One completed habit for one student on one day."""
    __tablename__ = "Habit_Log"
    __table_args__ = (
        Index("idx_habit_log_student_date", "std_id", "log_date"),
        Index("uq_habit_log_student_habit_date", "std_id", "habit_id", "log_date", unique=True),
    )

    log_id = Column(Integer, primary_key=True, autoincrement=True)
    std_id = Column(Integer, ForeignKey("Student.std_id"), nullable=False)
    habit_id = Column(Integer, ForeignKey("Habit.habit_id"), nullable=False)
    log_date = Column(Date, nullable=False)
    completed = Column(SmallInteger, nullable=False, default=0)
