"""
Unit tests for feedback_api.config.
"""
import pytest

from feedback_api.config import Settings


class TestSettings:
    """Settings parsing and production guards."""

    def test_cors_origins_split(self):
        settings = Settings(cors_origins_str="http://a.test, http://b.test,")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_development_allows_fallback_secret(self):
        settings = Settings(app_env="development", jwt_secret="default_secret")
        assert settings.jwt_secret == "default_secret"
        assert settings.is_production is False

    def test_production_rejects_fallback_secret(self):
        with pytest.raises(ValueError):
            Settings(app_env="production", jwt_secret="default_secret")

    def test_production_rejects_short_secret(self):
        with pytest.raises(ValueError):
            Settings(app_env="production", jwt_secret="x" * 16)

    def test_production_accepts_strong_secret(self):
        settings = Settings(app_env="production", jwt_secret="a1" * 20)
        assert settings.is_production is True
