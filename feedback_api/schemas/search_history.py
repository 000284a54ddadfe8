"""
Pydantic schemas for the Search History API.
"""
import json
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchHistoryCreate(BaseModel):
    """Search to save. Content is stored as given."""
    model_config = ConfigDict(populate_by_name=True)

    search_url: Optional[str] = Field(None, alias="searchUrl", description="Query URL")
    search_response: Optional[Any] = Field(None, alias="searchResponse", description="Response payload")

    @field_validator("search_url", mode="before")
    @classmethod
    def stringify_search_url(cls, value: Any) -> Optional[str]:
        """Any JSON value is accepted and stored as its string form."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value)


class SearchHistoryItem(BaseModel):
    """Saved search in responses."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_email: str = Field(..., alias="userEmail")
    search_url: Optional[str] = Field(None, alias="searchUrl")
    search_response: Optional[Any] = Field(None, alias="searchResponse")
    timestamp: datetime


class MessageResponse(BaseModel):
    """Plain message response."""
    message: str
