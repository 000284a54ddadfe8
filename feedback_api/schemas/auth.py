"""
Pydantic schemas for the Auth API.
"""
from typing import Optional
from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Register or login request. Missing fields are reported by the auth service."""
    email: Optional[str] = Field(None, description="User email")
    password: Optional[str] = Field(None, description="Plain password")


class AuthResponse(BaseModel):
    """Successful register/login response."""
    message: str
    token: str
    email: str


class AuthResult(BaseModel):
    """Token issued by the auth service."""
    token: str
    email: str


class TokenClaims(BaseModel):
    """Decoded claims of a valid access token."""
    id: str
    email: str


class UserProfile(BaseModel):
    """User profile response."""
    email: str
