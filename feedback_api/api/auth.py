"""
Auth API Endpoints
Registration and login
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_api.database import get_db
from feedback_api.schemas.auth import AuthResponse, CredentialsRequest
from feedback_api.services.auth_service import auth_service


router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: Optional[CredentialsRequest] = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Register new user with email and password.

    - 400 if email or password is missing
    - 400 if the email is already registered
    - Hashes password with bcrypt and returns a one-hour JWT
    """
    request = request or CredentialsRequest()
    result = await auth_service.register(db, request.email, request.password)

    return AuthResponse(
        message="Registration successful!",
        token=result.token,
        email=result.email
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: Optional[CredentialsRequest] = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Login with email and password.

    Wrong email and wrong password give the same 400 response.
    """
    request = request or CredentialsRequest()
    result = await auth_service.login(db, request.email, request.password)

    return AuthResponse(
        message="Login successful",
        token=result.token,
        email=result.email
    )
