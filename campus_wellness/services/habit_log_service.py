"""Daily habit completion, stored as a full replace of a student's day."""

import logging
from collections.abc import Sequence
from contextlib import contextmanager
from datetime import date
from threading import Lock

from sqlalchemy.orm import Session

from campus_wellness.core.errors import ValidationError
from campus_wellness.models.habit import Habit, HabitLog

logger = logging.getLogger(__name__)


class KeyedLocks:
    """One lock per key, dropped again once nobody holds or waits on it."""

    def __init__(self) -> None:
        self._guard = Lock()
        self._locks: dict[object, list] = {}

    @contextmanager
    def hold(self, key):
        with self._guard:
            entry = self._locks.setdefault(key, [Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


_day_locks = KeyedLocks()


def get_habit_catalog(db: Session) -> list[Habit]:
    return db.query(Habit).order_by(Habit.habit_id.asc()).all()


def get_completed_habits(db: Session, std_id: int, log_date: date | None = None) -> list[HabitLog]:
    log_date = log_date or date.today()
    return db.query(HabitLog).filter(
        HabitLog.std_id == std_id,
        HabitLog.log_date == log_date,
    ).order_by(HabitLog.habit_id.asc()).all()


def normalize_habit_ids(habit_ids) -> list[int]:
    if isinstance(habit_ids, (str, bytes)) or not isinstance(habit_ids, (Sequence, set, frozenset)):
        raise ValidationError('habit_ids must be a list of habit ids.')

    normalized: list[int] = []
    for habit_id in habit_ids:
        if isinstance(habit_id, bool) or not isinstance(habit_id, int):
            raise ValidationError('habit_ids must be a list of habit ids.')
        if habit_id not in normalized:
            normalized.append(habit_id)
    return normalized


def build_completed_entry(std_id: int, habit_id: int, log_date: date) -> HabitLog:
    return HabitLog(std_id=std_id, habit_id=habit_id, log_date=log_date, completed=1)


def set_completed_habits(db: Session, std_id: int | None, log_date: date | None, habit_ids) -> list[int]:
    """Replace the habits ``std_id`` completed on ``log_date`` with ``habit_ids``.

    The delete of the old day and the inserts of the new one commit together,
    so a failure leaves the previous submission in place. Calls for the same
    student and day are serialized within the process, and the unique index
    on (student, habit, day) rejects a duplicate racing in from another
    process. An empty list clears the day.
    """
    if std_id is None or log_date is None or habit_ids is None:
        raise ValidationError('std_id, habit_ids[], and log_date are required')
    completed_ids = normalize_habit_ids(habit_ids)

    with _day_locks.hold((std_id, log_date)):
        try:
            db.query(HabitLog).filter(
                HabitLog.std_id == std_id,
                HabitLog.log_date == log_date,
            ).delete(synchronize_session=False)
            db.add_all([build_completed_entry(std_id, habit_id, log_date) for habit_id in completed_ids])
            db.commit()
        except Exception:
            db.rollback()
            raise

    logger.info('Saved %d completed habits for student %s on %s', len(completed_ids), std_id, log_date)
    return completed_ids
