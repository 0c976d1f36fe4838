import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from campus_wellness.core import config
from campus_wellness.database import ensure_wellness_schema
from campus_wellness.routes import (
    admin_routes,
    appointment_routes,
    auth_routes,
    habit_routes,
    mood_routes,
    notification_routes,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

app = FastAPI(title='Campus Wellness API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': jsonable_encoder(exc.errors())},
    )


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        ensure_wellness_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.get('/')
def root():
    return {'status': 'Campus Wellness API Running'}


app.include_router(auth_routes.router, prefix='/auth')
app.include_router(mood_routes.router, prefix='/mood-log')
app.include_router(habit_routes.router)
app.include_router(appointment_routes.router)
app.include_router(notification_routes.router, prefix='/notifications')
app.include_router(admin_routes.router)
