import logging
from threading import Lock

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker

from campus_wellness.core import config


logger = logging.getLogger(__name__)

engine = create_engine(
    config.DATABASE_URL,
    echo=config.DATABASE_ECHO,
    connect_args={"check_same_thread": False}
    if config.DATABASE_URL.startswith("sqlite")
    else {},
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_wellness_schema_checked = False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_wellness_schema() -> None:
    """Create missing tables and the lookup indexes the endpoints filter on.

    Tables created by an older schema script do not carry the indexes, so
    they are added one by one against the live database.
    """
    global _wellness_schema_checked

    if _wellness_schema_checked:
        return

    with _schema_lock:
        if _wellness_schema_checked:
            return

        # Registers every mapped table on Base.metadata.
        from campus_wellness.models import appointment, habit, mood_log, notification, user  # noqa: F401

        Base.metadata.create_all(bind=engine)

        existing_tables = set(inspect(engine).get_table_names())
        with engine.begin() as connection:
            for table in Base.metadata.sorted_tables:
                if table.name not in existing_tables:
                    continue
                for index in table.indexes:
                    index.create(bind=connection, checkfirst=True)

        logger.info('Wellness schema verified on %s', engine.url.render_as_string(hide_password=True))
        _wellness_schema_checked = True
