import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError

from campus_wellness.auth import jwt_handler
from campus_wellness.auth.dependencies import SessionContext, get_session_context
from campus_wellness.routes.auth_routes import LoginRequest, login, me


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_login_request_normalizes_role() -> None:
    assert LoginRequest(role=' Professional ').role == 'professional'


def test_login_request_rejects_unknown_role() -> None:
    with pytest.raises(ValidationError):
        LoginRequest(role='janitor')


@pytest.mark.parametrize(
    ('role', 'std_id', 'redirect'),
    [
        ('student', 101, 'student_dashboard.html'),
        ('professional', None, 'professional_dashboard.html'),
        ('admin', None, 'admin_dashboard.html'),
    ],
)
def test_login_issues_token_and_dashboard_redirect(role: str, std_id, redirect: str) -> None:
    response = login(LoginRequest(role=role, std_id=std_id))

    payload = jwt_handler.decode_access_token(response['access_token'])
    assert response['token_type'] == 'bearer'
    assert response['redirect'] == redirect
    assert payload['role'] == role
    assert payload['std_id'] == std_id


def test_student_login_requires_std_id() -> None:
    with pytest.raises(HTTPException) as exception_info:
        login(LoginRequest(role='student'))

    assert exception_info.value.status_code == 400


def test_session_context_is_resolved_from_token() -> None:
    token = login(LoginRequest(role='student', std_id=101))['access_token']

    context = get_session_context(_credentials(token))

    assert context == SessionContext(role='student', std_id=101)
    assert me(context) == {'role': 'student', 'std_id': 101}


def test_session_context_rejects_garbage_token() -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_session_context(_credentials('not-a-token'))

    assert exception_info.value.status_code == 401


def test_session_context_rejects_token_without_known_role() -> None:
    token = jwt_handler.create_access_token(subject='someone', claims={'role': 'janitor'})

    with pytest.raises(HTTPException) as exception_info:
        get_session_context(_credentials(token))

    assert exception_info.value.detail == 'Invalid token role'
