"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from catalog.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.APP_TITLE == "Local Library"
    assert settings.LOG_EXCLUDED_PATHS == ["/metrics", "/health"]


def test_log_level_normalized():
    assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="verbose")


@pytest.mark.parametrize(
    "environment, is_production", [("production", True), ("testing", False)]
)
def test_is_production(environment, is_production):
    settings = Settings(_env_file=None, ENVIRONMENT=environment)

    assert settings.IS_PRODUCTION is is_production


def test_is_sqlite():
    settings = Settings(
        _env_file=None, DATABASE_URL="postgresql+asyncpg://u:p@db/catalog"
    )

    assert not settings.IS_SQLITE
