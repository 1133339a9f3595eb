"""Shared test fixtures."""
import pytest

from opensums_plugin.plugins.config_store import ConfigStore


@pytest.fixture(autouse=True)
def reset_config_store():
    """Start and finish every test without a shared ConfigStore."""
    ConfigStore.reset_instance()
    yield
    ConfigStore.reset_instance()


@pytest.fixture
def app():
    """Application configured for tests, with in-memory options."""
    from opensums_plugin.app import create_app
    from opensums_plugin.extensions import db

    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "OPTIONS_BACKEND": "memory",
        "PLUGIN_NAME": "opensums-wp-plugin",
        "PLUGIN_VERSION": "1.0.0-dev",
    })
    with app.app_context():
        db.create_all()
    yield app


@pytest.fixture
def client(app):
    """Test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI runner for the app."""
    return app.test_cli_runner()
