"""Repositories package."""
from opensums_plugin.repositories.option_repository import OptionRepository

__all__ = ["OptionRepository"]
