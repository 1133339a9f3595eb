"""OpenSums plugin skeleton."""
from opensums_plugin.plugins.metadata import PLUGIN

__version__ = PLUGIN.version

__all__ = ["PLUGIN", "__version__"]
