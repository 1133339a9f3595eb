"""CLI commands."""
from opensums_plugin.cli.plugin import init_db, plugin_cli

__all__ = ["init_db", "plugin_cli"]
