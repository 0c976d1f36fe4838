import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from campus_wellness.core.errors import InvalidTransitionError, ValidationError, WellnessError
from campus_wellness.database import ensure_wellness_schema

logger = logging.getLogger(__name__)


def ensure_database_ready() -> None:
    try:
        ensure_wellness_schema()
    except SQLAlchemyError as exc:
        logger.exception('Wellness schema check failed')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc


def store_error(exc: SQLAlchemyError, db: Session | None = None) -> HTTPException:
    if db is not None:
        db.rollback()
    logger.exception('Store operation failed')
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(getattr(exc, 'orig', None) or exc),
    )


def domain_error(exc: WellnessError) -> HTTPException:
    if isinstance(exc, InvalidTransitionError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
