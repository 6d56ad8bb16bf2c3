import hmac
from datetime import UTC, datetime, timedelta

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from app.exceptions import UnauthorizedError

ALGORITHM = "HS256"

_bearer = HTTPBearer(auto_error=False)


def issue_token(subject: str, expires_minutes: int | None = None) -> str:
    minutes = settings.jwt_expire_minutes if expires_minutes is None else expires_minutes
    payload = {"sub": subject, "exp": datetime.now(UTC) + timedelta(minutes=minutes)}
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def check_credentials(username: str, password: str) -> bool:
    return hmac.compare_digest(username, settings.auth_username) and hmac.compare_digest(
        password, settings.auth_password
    )


async def verify_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),  # noqa: B008
) -> dict:
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")
    try:
        claims = jwt.decode(credentials.credentials, settings.jwt_secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired") from None
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token") from None

    if not claims.get("sub"):
        raise UnauthorizedError("Token has no subject")
    return claims
