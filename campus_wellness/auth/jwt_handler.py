from datetime import datetime, timedelta, timezone

import jwt

from campus_wellness.core import config

def create_access_token(subject: str, claims: dict | None = None, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    now = datetime.now(timezone.utc)
    payload = {**(claims or {}), "sub": subject, "exp": now + timedelta(minutes=expire_minutes), "iat": now}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
