"""Plugin configuration backed by named options.

Access configuration with these methods:
  - config.set("key", value)       store a value (marks persisted entries dirty)
  - config.get("key")              get a single value, loading it lazily
  - config.all(loaded=True)        get all loaded values
  - config.has("key")              check if a key is defined

Lifecycle:
  - config.activate()              create every persisted entry that is missing
  - config.uninstall()             delete every persisted entry
  - config.flush()                 write dirty entries (also run at exit)
"""
import atexit
import copy
import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from opensums_plugin.plugins.exceptions import KeyNotFoundError, UnsupportedOperationError
from opensums_plugin.plugins.metadata import PLUGIN
from opensums_plugin.plugins.option_store import MemoryOptionStore, OptionStore

logger = logging.getLogger(__name__)


class Persistence(enum.Enum):
    """Where the value of an entry is durably stored."""

    NONE = "none"
    OPTION = "option"


@dataclass
class EntryDefinition:
    """Schema record for one configuration key."""

    persist: Persistence = Persistence.NONE
    default: Any = None


def default_entries() -> Dict[str, EntryDefinition]:
    """Entries every plugin configuration starts with."""
    return {
        "activated": EntryDefinition(persist=Persistence.OPTION, default=False),
    }


class ConfigStore:
    """
    Configuration for a plugin.

    Values are loaded from the option store on first access, held in memory,
    and written back on flush() for the keys that changed since the last one.
    One instance is shared by the whole process; obtain it with instance().
    """

    _instance: Optional["ConfigStore"] = None

    def __init__(
        self,
        name: str,
        version: str,
        option_store: Optional[OptionStore] = None,
        entries: Optional[Dict[str, EntryDefinition]] = None,
    ):
        self._entries: Dict[str, EntryDefinition] = default_entries()
        for key, entry in (entries or {}).items():
            if key in self._entries:
                raise ValueError(f"Config entry '{key}' is built in and cannot be redefined")
            self._entries[key] = entry
        self._values: Dict[str, Any] = {}
        # dict rather than set so flush order follows the order of writes
        self._dirty: Dict[str, bool] = {}
        self._option_store = option_store if option_store is not None else MemoryOptionStore()
        self._prefix = self._kebab_case_to_snake_case(name) + "_"

        self.set("pluginName", name)
        self.set("version", version)

    # ------------------------------------------------------------------
    # Process-wide instance
    # ------------------------------------------------------------------

    @classmethod
    def instance(
        cls,
        name: Optional[str] = None,
        version: Optional[str] = None,
        option_store: Optional[OptionStore] = None,
        entries: Optional[Dict[str, EntryDefinition]] = None,
    ) -> "ConfigStore":
        """
        Get the shared configuration, creating it on the first call.

        Arguments are only used by the first call; later calls return the
        existing object unchanged. The instance is flushed at interpreter exit.
        """
        if cls._instance is None:
            store = cls(name or PLUGIN.name, version or PLUGIN.version, option_store, entries)
            atexit.register(store._flush_at_exit)
            cls._instance = store
            logger.debug(f"Created configuration for plugin '{store.get('pluginName')}'")
        return cls._instance

    @classmethod
    def current(cls) -> Optional["ConfigStore"]:
        """Return the shared configuration if it has been created."""
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared configuration without flushing it."""
        if cls._instance is not None:
            atexit.unregister(cls._instance._flush_at_exit)
        cls._instance = None

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def option_store(self) -> OptionStore:
        return self._option_store

    @property
    def prefix(self) -> str:
        """Namespace prepended to every persisted option name."""
        return self._prefix

    def option_name(self, key: str) -> str:
        """Return the persisted option name for a key."""
        return f"{self._prefix}{key}"

    def get(self, key: str, default: Any = None, strict: bool = False) -> Any:
        """
        Get the value of an entry.

        Args:
            key: The key
            default: Returned when the key is not defined
            strict: Raise KeyNotFoundError instead of returning default

        Returns:
            The loaded value, the persisted or schema default for a defined
            key that was not loaded yet, or default.
        """
        if key in self._values:
            return self._values[key]
        if key in self._entries:
            self._load_entry(key)
            return self._values[key]
        if strict:
            raise KeyNotFoundError(key)
        return default

    def set(self, key: str, value: Any) -> "ConfigStore":
        """
        Set the value of an entry.

        Unknown keys are added to the schema as memory-only entries.

        Returns:
            self, for chaining
        """
        if key not in self._entries:
            self._in_memory_create(key, value, declare=True)
            return self
        self._values[key] = value
        self._dirty[key] = True
        return self

    def set_known(self, key: str, value: Any) -> "ConfigStore":
        """Set the value of a defined entry; raises KeyNotFoundError otherwise."""
        if key not in self._entries:
            raise KeyNotFoundError(key)
        return self.set(key, value)

    def declare_and_set(self, key: str, value: Any) -> "ConfigStore":
        """Set a value, declaring the key as a memory-only entry if it is new."""
        return self.set(key, value)

    def has(self, key: str) -> bool:
        """Return True iff the entry is defined (loaded or not)."""
        return key in self._entries

    def keys(self, loaded: bool = False) -> List[str]:
        """Return defined keys, or only the loaded ones."""
        return list(self._values if loaded else self._entries)

    def all(self, loaded: bool = False) -> Dict[str, Any]:
        """
        Get the values of all loaded entries.

        Raises:
            UnsupportedOperationError: unless loaded is True; values of
                unloaded entries are not resolved here.
        """
        if not loaded:
            raise UnsupportedOperationError("ConfigStore.all() cannot yet return unloaded entries")
        return dict(self._values)

    def definition(self, key: str) -> EntryDefinition:
        """Return the schema record for a key."""
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def dirty_keys(self) -> List[str]:
        """Keys changed since the last flush."""
        return list(self._dirty)

    def is_dirty(self, key: str) -> bool:
        return key in self._dirty

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> "ConfigStore":
        """Persist every entry that does not exist yet, using its default."""
        for key, entry in list(self._entries.items()):
            self._persist_create(key, copy.deepcopy(entry.default))
        return self

    def uninstall(self) -> "ConfigStore":
        """Delete every persisted entry and forget its loaded value."""
        for key in list(self._entries):
            self._persist_delete(key)
        return self

    def flush(self) -> "ConfigStore":
        """
        Write every dirty entry through its persistence strategy.

        Keys are written one at a time; if a write fails, the keys already
        written stay written and the rest stay dirty.
        """
        if self._dirty:
            logger.debug(f"Flushing {len(self._dirty)} dirty config entries")
        for key in list(self._dirty):
            self._persist_update(key, self._values[key])
            del self._dirty[key]
        return self

    def close(self) -> None:
        """Flush at end of life."""
        self.flush()

    def _flush_at_exit(self) -> None:
        # Runs from atexit, outside any request or app context
        try:
            self.flush()
        except Exception as e:
            logger.warning(f"Failed to flush plugin config at exit, {len(self._dirty)} entries not written: {e}")

    def __enter__(self) -> "ConfigStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # ------------------------------------------------------------------
    # Grouped options
    # ------------------------------------------------------------------

    def get_sub_option(self, group: str, name: str, default: Any = None) -> Any:
        """Read one value from an option holding a mapping."""
        current = self._option_store.get(self.option_name(group))
        if not isinstance(current, dict):
            return default
        return current.get(name, default)

    def set_sub_option(self, group: str, name: str, value: Any) -> "ConfigStore":
        """Write one value into an option holding a mapping."""
        option_name = self.option_name(group)
        current = self._option_store.get(option_name)
        if not isinstance(current, dict):
            current = {}
        current = dict(current)
        current[name] = value
        self._option_store.update(option_name, current)
        # A cached value for the same option would overwrite this on flush
        self._values.pop(group, None)
        self._dirty.pop(group, None)
        return self

    # ------------------------------------------------------------------
    # Persistence dispatch
    # ------------------------------------------------------------------

    def _load_entry(self, key: str) -> None:
        entry = self._entries[key]
        if entry.persist == Persistence.OPTION:
            value = self._option_store.get(self.option_name(key), copy.deepcopy(entry.default))
        else:
            value = copy.deepcopy(entry.default)
        self._values[key] = value
        logger.debug(f"Loaded config entry '{key}'")

    def _in_memory_create(self, key: str, value: Any, declare: bool = False) -> None:
        if declare:
            self._entries[key] = EntryDefinition(persist=Persistence.NONE)
            self._values[key] = value
        elif key not in self._values:
            self._values[key] = value

    def _persist_create(self, key: str, value: Any) -> None:
        entry = self._entries.get(key, EntryDefinition())
        if entry.persist == Persistence.OPTION:
            self._option_store.add(self.option_name(key), value, autoload=False)
        else:
            self._in_memory_create(key, value)

    def _persist_update(self, key: str, value: Any) -> None:
        entry = self._entries.get(key, EntryDefinition())
        if entry.persist == Persistence.OPTION:
            self._option_store.update(self.option_name(key), value)

    def _persist_delete(self, key: str) -> None:
        entry = self._entries.get(key, EntryDefinition())
        if entry.persist == Persistence.OPTION:
            self._option_store.delete(self.option_name(key))
            self._values.pop(key, None)
            self._dirty.pop(key, None)

    @staticmethod
    def _kebab_case_to_snake_case(value: str) -> str:
        return value.replace("-", "_")
