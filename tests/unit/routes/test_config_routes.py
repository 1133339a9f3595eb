"""Tests for plugin configuration routes."""
from opensums_plugin.plugins.config_store import ConfigStore


class TestConfigRoutes:
    """Test /api/v1/config endpoints."""

    def test_list_config(self, client):
        response = client.get("/api/v1/config")

        assert response.status_code == 200
        assert response.json["values"]["pluginName"] == "opensums-wp-plugin"
        assert "activated" in response.json["keys"]

    def test_get_schema_value(self, client):
        response = client.get("/api/v1/config/activated")

        assert response.status_code == 200
        assert response.json == {"key": "activated", "value": False}

    def test_get_unknown_value_is_404(self, client):
        response = client.get("/api/v1/config/missing")

        assert response.status_code == 404
        assert "does not exist" in response.json["error"]

    def test_put_value(self, client):
        response = client.put("/api/v1/config/activated", json={"value": True})

        assert response.status_code == 200
        assert response.json["value"] is True

        response = client.get("/api/v1/config/activated")
        assert response.json["value"] is True

    def test_put_flushes_at_end_of_request(self, app, client):
        client.put("/api/v1/config/activated", json={"value": True})

        config = ConfigStore.current()
        assert config.dirty_keys() == []
        assert config.option_store.get("opensums_wp_plugin_activated") is True

    def test_put_ad_hoc_value(self, client):
        response = client.put("/api/v1/config/colour", json={"value": "blue"})

        assert response.status_code == 200
        assert client.get("/api/v1/config/colour").json["value"] == "blue"

    def test_put_requires_value_field(self, client):
        response = client.put("/api/v1/config/activated", json={"wrong": True})

        assert response.status_code == 400
        assert "error" in response.json
