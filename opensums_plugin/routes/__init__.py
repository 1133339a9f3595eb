"""HTTP routes."""
from opensums_plugin.routes.config import config_bp

__all__ = ["config_bp"]
