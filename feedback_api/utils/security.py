"""
Security Utilities
JWT token generation and password hashing
"""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from feedback_api.config import settings
from feedback_api.exceptions import AuthError
from feedback_api.schemas.auth import TokenClaims

# Logger
logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds
)

# Bearer scheme; a missing header is reported by get_current_user, not FastAPI
security = HTTPBearer(auto_error=False)

# JWT settings (from config)
SECRET_KEY = settings.jwt_secret
ALGORITHM = settings.jwt_algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes

# Hash compared against when the user doesn't exist, so a failed login
# takes the same time whether or not the email is registered
DUMMY_PASSWORD_HASH = pwd_context.hash("dummy_password_for_timing_attack_prevention")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognized or corrupt stored hash
        logger.warning("Password verification against an unusable hash")
        return False


async def hash_password_async(password: str) -> str:
    """hash_password in the default executor; bcrypt is sync."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hash_password, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    """verify_password in the default executor; bcrypt is sync."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, verify_password, plain_password, hashed_password)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create JWT access token.

    Args:
        data: Payload to encode (e.g., {"sub": user_id, "email": email})
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

    return encoded_jwt


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and validate JWT access token.

    Args:
        token: JWT token string

    Returns:
        Decoded payload or None if invalid, tampered with or expired
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        # Verify token type
        if payload.get("type") != "access":
            return None
        return payload
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenClaims:
    """
    Dependency resolving the caller from the Bearer token.

    The claims are trusted as issued; no database lookup is made.

    Raises:
        AuthError: If the header is missing or the token is invalid
    """
    from feedback_api.services.auth_service import auth_service

    if credentials is None or not credentials.credentials:
        raise AuthError("Unauthorized")

    return auth_service.verify(credentials.credentials)
