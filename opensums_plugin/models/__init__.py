"""Domain models package."""
from opensums_plugin.models.option import Option

__all__ = ["Option"]
