"""Tests for application configuration."""
import os
import pytest
from unittest.mock import patch

from opensums_plugin.config import get_options_backend


class TestProductionConfig:
    """Tests for ProductionConfig security validations."""

    def test_production_config_requires_flask_secret_key(self):
        """ProductionConfig raises error if FLASK_SECRET_KEY not set."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("FLASK_SECRET_KEY", None)

            from opensums_plugin.config import ProductionConfig

            with pytest.raises(ValueError, match="FLASK_SECRET_KEY must be set"):
                ProductionConfig()

    def test_production_config_rejects_default_flask_secret(self):
        """ProductionConfig rejects default dev SECRET_KEY value."""
        with patch.dict(
            os.environ,
            {"FLASK_SECRET_KEY": "dev-secret-key-change-in-production"},
            clear=False,
        ):
            from opensums_plugin.config import ProductionConfig

            with pytest.raises(ValueError, match="insecure default"):
                ProductionConfig()

    def test_production_config_accepts_valid_secret(self):
        """ProductionConfig accepts a properly set secret."""
        with patch.dict(
            os.environ,
            {"FLASK_SECRET_KEY": "a-secure-production-secret-key-here"},
            clear=False,
        ):
            from opensums_plugin.config import ProductionConfig

            config = ProductionConfig()
            assert config.SECRET_KEY == "a-secure-production-secret-key-here"


class TestGetConfig:
    """Tests for environment selection."""

    def test_testing_config_uses_memory_options(self):
        from opensums_plugin.config import get_config, TestingConfig

        config = get_config("testing")
        assert config is TestingConfig
        assert config.OPTIONS_BACKEND == "memory"

    def test_unknown_env_falls_back_to_development(self):
        from opensums_plugin.config import get_config, DevelopmentConfig

        assert get_config("nope") is DevelopmentConfig


class TestOptionsBackend:
    """Tests for OPTIONS_BACKEND parsing."""

    def test_default_backend_is_database(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("OPTIONS_BACKEND", None)
            assert get_options_backend() == "database"

    def test_backend_is_case_insensitive(self):
        with patch.dict(os.environ, {"OPTIONS_BACKEND": "JSON"}):
            assert get_options_backend() == "json"

    def test_rejects_unknown_backend(self):
        with patch.dict(os.environ, {"OPTIONS_BACKEND": "redis"}):
            with pytest.raises(ValueError, match="OPTIONS_BACKEND must be one of"):
                get_options_backend()
