"""Feedback Analysis API - user auth and per-user search history."""

__version__ = "0.1.0"
