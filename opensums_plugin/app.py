"""Flask application factory."""
import logging
from flask import Flask, jsonify
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    from opensums_plugin.config import get_config
    app.config.from_object(get_config())
    if config:
        app.config.update(config)

    # Initialize extensions
    from opensums_plugin.extensions import db
    import opensums_plugin.models  # noqa: F401 - register tables
    db.init_app(app)

    # Initialize DI container
    from opensums_plugin.container import Container
    container = Container()
    container.config.from_dict({
        "options": {
            "backend": app.config["OPTIONS_BACKEND"],
            "dir": app.config["OPTIONS_DIR"],
        },
        "plugin": {
            "name": app.config["PLUGIN_NAME"],
            "version": app.config["PLUGIN_VERSION"],
        },
    })
    container.db_session.override(db.session)
    app.container = container

    @app.teardown_appcontext
    def flush_config(exception=None):
        """Write config changes made while handling the request."""
        from opensums_plugin.plugins.config_store import ConfigStore
        config_store = ConfigStore.current()
        if config_store is None:
            return
        # Keys that failed to write stay dirty for the next flush
        try:
            config_store.flush()
        except Exception as e:
            logger.warning(f"Failed to flush plugin config: {e}")

    # Register blueprints
    from opensums_plugin.routes import config_bp
    app.register_blueprint(config_bp)

    # Register CLI commands
    from opensums_plugin.cli import init_db, plugin_cli
    app.cli.add_command(plugin_cli)
    app.cli.add_command(init_db)

    # Health check endpoint
    @app.route("/api/v1/health")
    def health():
        """Health check endpoint."""
        from opensums_plugin import __version__
        return jsonify({
            "status": "ok",
            "service": app.config["PLUGIN_NAME"],
            "version": __version__
        }), 200

    # Root endpoint
    @app.route("/")
    def root():
        """Root endpoint."""
        return jsonify({
            "message": "OpenSums plugin",
            "plugin": app.config["PLUGIN_NAME"],
            "health": "/api/v1/health"
        }), 200

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({"error": "Internal server error"}), 500

    return app
