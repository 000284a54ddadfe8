"""
Search History Model
"""
from datetime import datetime
from typing import Any, Optional
from sqlalchemy import Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import JSONB

from feedback_api.database import Base
from feedback_api.models.user import utcnow


class SearchHistory(Base):
    """A saved search: the query URL and the response payload it produced."""

    __tablename__ = "search_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Email of the token holder at save time; not a foreign key
    user_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    search_url: Mapped[Optional[str]] = mapped_column(Text)
    search_response: Mapped[Optional[Any]] = mapped_column(JSON().with_variant(JSONB(), "postgresql"))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)
