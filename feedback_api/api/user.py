"""
User API Endpoints
Profile
"""
from fastapi import APIRouter, Depends

from feedback_api.schemas.auth import TokenClaims, UserProfile
from feedback_api.utils.security import get_current_user


router = APIRouter()


@router.get("/user-profile", response_model=UserProfile)
async def get_profile(current_user: TokenClaims = Depends(get_current_user)):
    """Email of the token holder, read from the token alone."""
    return UserProfile(email=current_user.email)
