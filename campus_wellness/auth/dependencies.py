from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from campus_wellness.auth import jwt_handler

security = HTTPBearer()

ROLES = ("student", "professional", "admin")


@dataclass(frozen=True)
class SessionContext:
    """Who the caller said they are at login. Nothing here is verified."""

    role: str
    std_id: int | None = None


def get_session_context(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> SessionContext:
    token = credentials.credentials
    try:
        payload = jwt_handler.decode_access_token(token)
    except jwt.PyJWTError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    role = payload.get("role")
    if role not in ROLES:
        raise HTTPException(status_code=401, detail="Invalid token role")

    return SessionContext(role=role, std_id=payload.get("std_id"))
