"""Plugin configuration, option stores and lifecycle hooks."""
from opensums_plugin.plugins.config_store import ConfigStore, EntryDefinition, Persistence
from opensums_plugin.plugins.exceptions import (
    ConfigError,
    KeyNotFoundError,
    UnsupportedOperationError,
)
from opensums_plugin.plugins.install import Install
from opensums_plugin.plugins.json_option_store import JsonFileOptionStore
from opensums_plugin.plugins.metadata import PLUGIN, PluginMetadata
from opensums_plugin.plugins.option_store import MemoryOptionStore, OptionStore

__all__ = [
    "ConfigStore",
    "EntryDefinition",
    "Persistence",
    "ConfigError",
    "KeyNotFoundError",
    "UnsupportedOperationError",
    "Install",
    "JsonFileOptionStore",
    "PLUGIN",
    "PluginMetadata",
    "MemoryOptionStore",
    "OptionStore",
]
