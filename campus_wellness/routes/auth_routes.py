import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, field_validator

from campus_wellness.auth import jwt_handler
from campus_wellness.auth.dependencies import ROLES, SessionContext, get_session_context

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)

DASHBOARD_PAGES = {
    'student': 'student_dashboard.html',
    'professional': 'professional_dashboard.html',
    'admin': 'admin_dashboard.html',
}


class LoginRequest(BaseModel):
    role: str
    std_id: int | None = None

    @field_validator('role')
    @classmethod
    def validate_role(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in ROLES:
            raise ValueError('Select a role.')
        return normalized


@router.post('/login')
def login(data: LoginRequest):
    if data.role == 'student' and data.std_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='std_id is required for student login.',
        )

    subject = f'{data.role}:{data.std_id}' if data.std_id is not None else data.role
    token = jwt_handler.create_access_token(
        subject=subject,
        claims={'role': data.role, 'std_id': data.std_id},
    )
    logger.info('Issued %s session token', data.role)
    return {
        'access_token': token,
        'token_type': 'bearer',
        'role': data.role,
        'redirect': DASHBOARD_PAGES[data.role],
    }


@router.get('/me')
def me(context: SessionContext = Depends(get_session_context)):
    return {'role': context.role, 'std_id': context.std_id}
