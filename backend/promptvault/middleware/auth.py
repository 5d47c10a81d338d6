"""Caller identity and clock dependencies.

The caller is identified by the ``sub`` claim of a bearer JWT. Services
never read identity or time themselves; routers resolve both here and pass
them in explicitly.
"""

import time
from datetime import datetime, timedelta, timezone
from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from promptvault.config import settings

security = HTTPBearer()

Clock = Callable[[], int]


def create_access_token(principal: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": principal, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_caller(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    """Resolve the calling principal. No user record is required."""
    payload = decode_token(credentials.credentials)
    principal = payload.get("sub")
    if not principal:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    return principal


def get_clock() -> Clock:
    """Clock returning nanoseconds since the epoch."""
    return time.time_ns
