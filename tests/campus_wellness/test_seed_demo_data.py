from datetime import date

from campus_wellness.models.habit import Habit
from campus_wellness.models.mood_log import MoodLog
from campus_wellness.models.notification import Notification
from campus_wellness.models.user import Student, User
from campus_wellness.seed_demo_data import DEMO_HABITS, DEMO_STD_ID, seed_demo_data


def test_seed_demo_data_loads_sample_student_and_catalog(wellness_db) -> None:
    seed_demo_data(wellness_db, today=date(2026, 1, 6))

    assert wellness_db.get(User, 1).role == 'student'
    assert wellness_db.query(Student).one().std_id == DEMO_STD_ID
    assert [h.habit_name for h in wellness_db.query(Habit).order_by(Habit.habit_id)] == [n for n, _ in DEMO_HABITS]
    assert wellness_db.query(MoodLog).one().emotional_status == 'Calm'
    assert wellness_db.query(Notification).one().msg == 'Welcome to Campus Wellness!'


def test_seed_demo_data_can_run_twice(wellness_db) -> None:
    seed_demo_data(wellness_db, today=date(2026, 1, 6))
    seed_demo_data(wellness_db, today=date(2026, 1, 6))

    assert wellness_db.query(User).count() == 1
    assert wellness_db.query(Habit).count() == len(DEMO_HABITS)
    assert wellness_db.query(MoodLog).count() == 1
    assert wellness_db.query(Notification).count() == 1
