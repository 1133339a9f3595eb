"""Abstract interface for option persistence."""
import copy
from abc import ABC, abstractmethod
from typing import Any


class OptionStore(ABC):
    """
    Abstract key-value store for named options.

    Mirrors the host option API: names passed in are already namespaced
    by the caller.
    """

    @abstractmethod
    def add(self, name: str, value: Any, autoload: bool = False) -> bool:
        """Create an option if it does not exist. Returns False if it did."""
        ...

    @abstractmethod
    def update(self, name: str, value: Any) -> bool:
        """Overwrite an option, creating it when absent."""
        ...

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Delete an option. Returns False if there was nothing to delete."""
        ...

    @abstractmethod
    def get(self, name: str, default: Any = None) -> Any:
        """Get an option value, or default when absent."""
        ...

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return True iff the option exists."""
        ...


class MemoryOptionStore(OptionStore):
    """
    Option store that keeps everything in a dict for the process lifetime.

    Values are copied in and out, so callers never share objects with the store.
    """

    def __init__(self):
        self._options = {}
        self._autoload = {}

    def add(self, name: str, value: Any, autoload: bool = False) -> bool:
        if name in self._options:
            return False
        self._options[name] = copy.deepcopy(value)
        self._autoload[name] = autoload
        return True

    def update(self, name: str, value: Any) -> bool:
        self._options[name] = copy.deepcopy(value)
        self._autoload.setdefault(name, True)
        return True

    def delete(self, name: str) -> bool:
        if name not in self._options:
            return False
        del self._options[name]
        self._autoload.pop(name, None)
        return True

    def get(self, name: str, default: Any = None) -> Any:
        if name not in self._options:
            return default
        return copy.deepcopy(self._options[name])

    def has(self, name: str) -> bool:
        return name in self._options

    def is_autoload(self, name: str) -> bool:
        """Return the autoload hint an option was created with."""
        return self._autoload.get(name, False)
