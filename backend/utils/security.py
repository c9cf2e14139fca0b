"""
Password hashing and JWT bearer tokens.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from pydantic import BaseModel

from config.settings import settings
from constants import HTTPStatus
from exceptions import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


class TokenData(BaseModel):
    sub: str
    user_id: str
    iat: int
    exp: int


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, expires_in: int | None = None) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user_id: ID stored in the sub and user_id claims
        expires_in: Lifetime in seconds, defaults to JWT_EXPIRES_SECONDS

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    lifetime = settings.jwt_expires_in if expires_in is None else expires_in
    payload: Dict[str, Any] = {
        "sub": user_id,
        "user_id": user_id,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=lifetime)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> TokenData:
    """
    Verify a token's signature and expiry.

    Raises:
        AuthenticationError: If the token is expired, tampered with or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
        payload.setdefault("user_id", payload["sub"])
        return TokenData(**payload)
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise AuthenticationError("Invalid token")


async def require_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_token(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
