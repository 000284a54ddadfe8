"""Models package"""
from feedback_api.models.user import User
from feedback_api.models.search_history import SearchHistory

__all__ = [
    "User",
    "SearchHistory"
]
