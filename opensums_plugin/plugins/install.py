"""Lifecycle hooks fired by the host when the plugin is (de)activated or removed."""
import logging
from typing import Optional

from opensums_plugin.plugins.config_store import ConfigStore

logger = logging.getLogger(__name__)


class Install:
    """
    Plugin lifecycle callbacks.

    Each hook works on the shared ConfigStore unless one is passed in.
    """

    @staticmethod
    def activate(config: Optional[ConfigStore] = None) -> ConfigStore:
        """Called when the plugin is activated."""
        config = config or ConfigStore.instance()
        config.activate().set("activated", True).flush()
        logger.info(f"Activated plugin '{config.get('pluginName')}'")
        return config

    @staticmethod
    def deactivate(config: Optional[ConfigStore] = None) -> ConfigStore:
        """Called when the plugin is deactivated."""
        config = config or ConfigStore.instance()
        config.set("activated", False).flush()
        logger.info(f"Deactivated plugin '{config.get('pluginName')}'")
        return config

    @staticmethod
    def uninstall(config: Optional[ConfigStore] = None) -> ConfigStore:
        """Called when the plugin is uninstalled. Deletes all persisted config."""
        config = config or ConfigStore.instance()
        config.uninstall()
        logger.info(f"Uninstalled plugin '{config.get('pluginName')}'")
        return config
