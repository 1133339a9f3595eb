"""Application configuration."""
import os
from typing import Optional

from opensums_plugin.plugins.metadata import PLUGIN

# Constants - avoid magic numbers
DEFAULT_SECRET_KEY = "dev-secret-key-change-in-production"
DEFAULT_DATABASE_URL = "sqlite:///opensums.db"
DEFAULT_OPTIONS_DIR = "var"
OPTIONS_BACKENDS = ("database", "json", "memory")


def get_database_url() -> str:
    """Get database connection URL."""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_options_backend() -> str:
    """Get the option store backend name."""
    backend = os.getenv("OPTIONS_BACKEND", "database").lower()
    if backend not in OPTIONS_BACKENDS:
        raise ValueError(
            f"OPTIONS_BACKEND must be one of {', '.join(OPTIONS_BACKENDS)}, got '{backend}'"
        )
    return backend


class Config:
    """Base configuration."""

    # Flask
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY", DEFAULT_SECRET_KEY)

    # Database
    SQLALCHEMY_DATABASE_URI = get_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Options
    OPTIONS_BACKEND = get_options_backend()
    OPTIONS_DIR = os.getenv("OPTIONS_DIR", DEFAULT_OPTIONS_DIR)

    # Plugin identity
    PLUGIN_NAME = os.getenv("PLUGIN_NAME", PLUGIN.name)
    PLUGIN_VERSION = os.getenv("PLUGIN_VERSION", PLUGIN.version)


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"  # In-memory for tests
    OPTIONS_BACKEND = "memory"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False

    def __init__(self):
        """Initialize production config and validate required env vars."""
        super().__init__()

        self.SECRET_KEY = os.getenv("FLASK_SECRET_KEY")

        if not self.SECRET_KEY:
            raise ValueError("FLASK_SECRET_KEY must be set in production")

        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            raise ValueError(
                "FLASK_SECRET_KEY is using insecure default value. "
                "Please set a secure secret key in production."
            )


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: Optional[str] = None) -> Config:
    """
    Get configuration based on environment.

    Args:
        env: Environment name (development, testing, production)

    Returns:
        Configuration class
    """
    if env is None:
        env = os.getenv("FLASK_ENV", "development")

    return config.get(env, config["default"])
