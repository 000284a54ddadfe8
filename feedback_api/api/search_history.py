"""
Search History API Endpoints
Save and list the caller's searches
"""
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_api.database import get_db
from feedback_api.schemas.auth import TokenClaims
from feedback_api.schemas.search_history import (
    MessageResponse,
    SearchHistoryCreate,
    SearchHistoryItem,
)
from feedback_api.services.search_history_service import search_history_service
from feedback_api.utils.security import get_current_user


router = APIRouter()


def as_utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def save_search(
    request: Optional[SearchHistoryCreate] = None,
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Save a search for the authenticated user."""
    request = request or SearchHistoryCreate()
    await search_history_service.save(
        db,
        owner_email=current_user.email,
        search_url=request.search_url,
        search_response=request.search_response
    )
    return MessageResponse(message="Saved successfully")


@router.get("", response_model=List[SearchHistoryItem])
async def list_searches(
    current_user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """All searches of the authenticated user, newest first."""
    records = await search_history_service.list(db, current_user.email)
    return [
        SearchHistoryItem(
            id=record.id,
            user_email=record.user_email,
            search_url=record.search_url,
            search_response=record.search_response,
            timestamp=as_utc(record.created_at)
        )
        for record in records
    ]
