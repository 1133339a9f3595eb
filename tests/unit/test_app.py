"""Tests for Flask application factory."""
from opensums_plugin.plugins.config_store import ConfigStore


class TestAppFactory:
    """Test cases for create_app factory function."""

    def test_create_app_returns_flask_instance(self, app):
        """create_app should return a Flask application instance."""
        assert app is not None
        assert app.name == "opensums_plugin.app"

    def test_create_app_applies_overrides(self, app):
        assert app.config["TESTING"] is True
        assert app.config["OPTIONS_BACKEND"] == "memory"

    def test_health_endpoint_returns_ok(self, client):
        """Health endpoint should return 200 OK."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json["status"] == "ok"
        assert response.json["service"] == "opensums-wp-plugin"
        assert response.json["version"] == "1.0.0-dev"

    def test_root_endpoint_returns_info(self, client):
        """Root endpoint should return plugin information."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json["plugin"] == "opensums-wp-plugin"
        assert response.json["health"] == "/api/v1/health"

    def test_404_error_handler(self, client):
        """404 errors should be handled properly."""
        response = client.get("/nonexistent")

        assert response.status_code == 404
        assert response.json["error"] == "Not found"

    def test_teardown_without_config_store_is_noop(self, app):
        with app.app_context():
            pass
        assert ConfigStore.current() is None

    def test_teardown_flush_failure_is_logged(self, app, mocker, caplog):
        config = app.container.config_store()
        config.set("activated", True)
        mocker.patch.object(config.option_store, "update", side_effect=RuntimeError("down"))

        with app.app_context():
            pass

        assert "Failed to flush plugin config: down" in caplog.text
        assert config.is_dirty("activated")


class TestContainerWiring:
    """Test cases for DI container wiring."""

    def test_app_has_container(self, app):
        """Application should have container attribute."""
        assert hasattr(app, "container")

    def test_container_config_store_is_shared(self, app):
        assert app.container.config_store() is app.container.config_store()
        assert app.container.config_store() is ConfigStore.current()
