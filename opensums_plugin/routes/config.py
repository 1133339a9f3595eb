"""Plugin configuration routes."""
import logging
from flask import Blueprint, jsonify, request, current_app
from opensums_plugin.plugins.exceptions import KeyNotFoundError

logger = logging.getLogger(__name__)

config_bp = Blueprint("config", __name__, url_prefix="/api/v1/config")


def _config_store():
    return current_app.container.config_store()


@config_bp.route("", methods=["GET"])
def list_config():
    """List loaded values and all defined keys."""
    config_store = _config_store()
    return jsonify({
        "values": config_store.all(loaded=True),
        "keys": config_store.keys(),
    }), 200


@config_bp.route("/<key>", methods=["GET"])
def get_config_value(key):
    """Get a single value; unknown keys are 404."""
    config_store = _config_store()
    try:
        value = config_store.get(key, strict=True)
    except KeyNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"key": key, "value": value}), 200


@config_bp.route("/<key>", methods=["PUT"])
def set_config_value(key):
    """Set a single value. Body: {"value": <any>}."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "value" not in data:
        return jsonify({"error": "Request body must be an object with a 'value' field"}), 400

    config_store = _config_store()
    config_store.set(key, data["value"])
    logger.info(f"Config entry '{key}' updated via API")
    return jsonify({"key": key, "value": config_store.get(key)}), 200
