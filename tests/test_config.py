"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.config import LogisticsSettings, SchemeExplorerSettings, Settings
from src.logging_setup import configure_logging
from src.models.enums import Language


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.schemes.combination_preview_limit == 10
        assert s.schemes.default_language == Language.EN
        assert s.logistics.retail_markup == Decimal("0.15")
        assert s.logistics.search_radius_km == 300
        assert s.environment == "development"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None)

    def test_group_env_override(self, monkeypatch):
        monkeypatch.setenv("COMBINATION_PREVIEW_LIMIT", "3")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "or")
        s = SchemeExplorerSettings(_env_file=None)
        assert s.combination_preview_limit == 3
        assert s.default_language == Language.OR

    def test_negative_preview_limit_rejected(self, monkeypatch):
        monkeypatch.setenv("COMBINATION_PREVIEW_LIMIT", "-1")
        with pytest.raises(ValidationError):
            SchemeExplorerSettings(_env_file=None)

    def test_logistics_override(self, monkeypatch):
        monkeypatch.setenv("TRUCK_RATE_PER_KM_QUINTAL", "4")
        assert LogisticsSettings(_env_file=None).truck_rate_per_km_quintal == Decimal("4")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        assert Settings(_env_file=None).environment == "staging"


class TestLogging:
    def test_configure_sets_root_level(self):
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
        configure_logging("INFO")
        assert logging.getLogger().level == logging.INFO
