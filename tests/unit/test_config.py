"""Unit tests for configuration module."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings
from src.core.container import build_container
from src.services.promotion_rules import UnknownPromotionRuleError


class TestSettings:
    """Tests for Settings class."""

    def test_settings_loads_from_environment(self) -> None:
        """Test that Settings loads values from environment variables."""
        env_vars = {
            "APP_NAME": "test-app",
            "APP_ENV": "testing",
            "DEBUG": "true",
            "PORT": "9000",
            "ANALYTICS_CACHE_TTL": "120",
            "PROMOTION_RULES": "vip,loyalty",
        }

        with patch.dict(os.environ, env_vars, clear=False):
            settings = Settings()

            assert settings.app_name == "test-app"
            assert settings.app_env == "testing"
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.analytics_cache_ttl == 120
            assert settings.promotion_rules_list == ["vip", "loyalty"]

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None, app_env="development", seed_demo_data=None)

        assert settings.analytics_cache_ttl == 60
        assert settings.promotion_rules_list == ["first_order", "high_value", "loyalty", "vip"]

    def test_cors_origins_list(self) -> None:
        settings = Settings(cors_origins="http://localhost:3000, http://example.com , ")

        assert settings.cors_origins_list == ["http://localhost:3000", "http://example.com"]

    def test_negative_cache_ttl_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(analytics_cache_ttl=-1)


class TestSeedDemoDataDefault:
    """Tests for the environment-driven seeding default."""

    def test_enabled_outside_production(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SEED_DEMO_DATA", None)
            settings = Settings(_env_file=None, app_env="development")
            assert settings.seed_demo_data is True

    def test_disabled_in_production(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SEED_DEMO_DATA", None)
            settings = Settings(_env_file=None, app_env="production")
            assert settings.seed_demo_data is False
            assert settings.is_production is True

    def test_explicit_value_wins(self) -> None:
        settings = Settings(_env_file=None, app_env="production", seed_demo_data=True)
        assert settings.seed_demo_data is True


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_returns_cached_instance(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestBuildContainer:
    """Tests for service wiring from settings."""

    def test_rules_follow_settings(self) -> None:
        container = build_container(Settings(promotion_rules="vip"))

        assert [rule.name for rule in container.promotion_engine.rules] == ["VIP Discount"]

    def test_services_share_one_store(self) -> None:
        container = build_container(Settings())

        assert container.status_service.order_store is container.order_store
        assert container.analytics_service.order_store is container.order_store
        assert container.analytics_service.cache is container.analytics_cache

    def test_unknown_rule_fails_fast(self) -> None:
        with pytest.raises(UnknownPromotionRuleError):
            build_container(Settings(promotion_rules="vip,nope"))
