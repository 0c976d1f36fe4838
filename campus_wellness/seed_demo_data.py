"""Create the wellness tables and load the demo student and habit catalog.

Usage:
    python -m campus_wellness.seed_demo_data

Running it again leaves existing rows alone.
"""
import logging
import sys
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.database import SessionLocal, ensure_wellness_schema
from campus_wellness.models.habit import Habit
from campus_wellness.models.mood_log import MoodLog
from campus_wellness.models.notification import Notification
from campus_wellness.models.user import Student, User

logger = logging.getLogger(__name__)

DEMO_STD_ID = 101
DEMO_HABITS = [
    ('Sleep before 12 AM', 'Sleep'),
    ('Exercise / Walk', 'Fitness'),
    ('Drink enough water', 'Lifestyle'),
    ('Study 2 hours', 'Academic'),
    ('Pray or Meditate', 'Spiritual'),
]
WELCOME_MESSAGE = 'Welcome to Campus Wellness!'


def seed_demo_data(db: Session, today: date | None = None) -> None:
    today = today or date.today()

    if db.get(User, 1) is None:
        db.add(User(
            user_id=1,
            name='Sample Student',
            email='sample@student.com',
            password='demo',
            phone='0000000000',
            role='student',
        ))
    if db.get(Student, 1) is None:
        db.add(Student(user_id=1, std_id=DEMO_STD_ID, department='CSE', semester='5'))

    existing_habits = {name for (name,) in db.query(Habit.habit_name).all()}
    for habit_name, category in DEMO_HABITS:
        if habit_name not in existing_habits:
            db.add(Habit(habit_name=habit_name, category=category))

    has_mood_entry = db.query(MoodLog).filter(
        MoodLog.std_id == DEMO_STD_ID,
        MoodLog.log_date == today,
    ).first()
    if has_mood_entry is None:
        db.add(MoodLog(
            std_id=DEMO_STD_ID,
            log_date=today,
            mood_rating=4,
            stress_level=2,
            energy_level=3,
            sleep_quantity=2,
            emotional_status='Calm',
            notes='Seed mood entry',
        ))

    has_welcome = db.query(Notification).filter(
        Notification.std_id == DEMO_STD_ID,
        Notification.msg == WELCOME_MESSAGE,
    ).first()
    if has_welcome is None:
        db.add(Notification(std_id=DEMO_STD_ID, msg=WELCOME_MESSAGE, is_read=0, appointment_reminder=0))

    db.commit()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        ensure_wellness_schema()
        seed_demo_data(db)
    except SQLAlchemyError as exc:
        db.rollback()
        print("Seeding failed:", exc, file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()
    logger.info('Demo data ready for student %s', DEMO_STD_ID)


if __name__ == "__main__":
    main()
