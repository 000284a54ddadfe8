"""
Search History Service
Saving and listing a user's searches.
"""
import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_api.exceptions import StorageError
from feedback_api.models.search_history import SearchHistory

logger = logging.getLogger(__name__)


class SearchHistoryService:
    """Per-user search history, scoped by the owner's email."""

    async def save(
        self,
        db: AsyncSession,
        owner_email: str,
        search_url: Optional[str],
        search_response: Optional[Any]
    ) -> SearchHistory:
        """
        Store a search stamped with the current time.

        Raises:
            StorageError: the insert failed
        """
        record = SearchHistory(
            user_email=owner_email,
            search_url=search_url,
            search_response=search_response
        )
        db.add(record)

        try:
            await db.commit()
            await db.refresh(record)
        except SQLAlchemyError as e:
            await db.rollback()
            raise StorageError("Error saving search history", operation="search_history.save") from e

        logger.debug("Saved search %s for %s", record.id, owner_email)
        return record

    async def list(self, db: AsyncSession, owner_email: str) -> List[SearchHistory]:
        """
        All searches of the owner, newest first. Not paginated.

        Raises:
            StorageError: the query failed
        """
        try:
            result = await db.execute(
                select(SearchHistory)
                .where(SearchHistory.user_email == owner_email)
                .order_by(SearchHistory.created_at.desc(), SearchHistory.id.desc())
            )
        except SQLAlchemyError as e:
            raise StorageError("Error fetching search history", operation="search_history.list") from e

        return list(result.scalars().all())


search_history_service = SearchHistoryService()
