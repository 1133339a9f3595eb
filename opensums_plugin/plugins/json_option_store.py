"""JSON file-based option store."""
import json
import logging
import os
import tempfile
from typing import Any

from opensums_plugin.plugins.option_store import OptionStore

logger = logging.getLogger(__name__)


class JsonFileOptionStore(OptionStore):
    """
    Persists options to a single JSON file on disk.

    Layout of options_dir/options.json:
      {"options": {"<name>": {"value": <any>, "autoload": <bool>}}}

    Every call reads the file and every mutation rewrites it atomically,
    so each call is independent of the others.
    """

    FILENAME = "options.json"

    def __init__(self, options_dir: str):
        self._options_dir = options_dir
        self._options_path = os.path.join(options_dir, self.FILENAME)

    @property
    def path(self) -> str:
        return self._options_path

    def _read_options(self) -> dict:
        """Read options.json, returning the 'options' dict."""
        try:
            with open(self._options_path, "r") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable options file '{self._options_path}': {e}")
            return {}
        options = data.get("options", {}) if isinstance(data, dict) else None
        if not isinstance(options, dict):
            logger.warning(f"Ignoring options file '{self._options_path}' with unexpected layout")
            return {}
        return options

    def _write_options(self, options: dict) -> None:
        """Atomically write options.json."""
        os.makedirs(self._options_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._options_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump({"options": options}, f, indent=2)
            os.replace(tmp_path, self._options_path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def add(self, name: str, value: Any, autoload: bool = False) -> bool:
        options = self._read_options()
        if name in options:
            return False
        options[name] = {"value": value, "autoload": autoload}
        self._write_options(options)
        return True

    def update(self, name: str, value: Any) -> bool:
        options = self._read_options()
        entry = options.get(name)
        if not isinstance(entry, dict):
            entry = {"autoload": True}
        entry["value"] = value
        options[name] = entry
        self._write_options(options)
        return True

    def delete(self, name: str) -> bool:
        options = self._read_options()
        if name not in options:
            return False
        del options[name]
        self._write_options(options)
        return True

    def get(self, name: str, default: Any = None) -> Any:
        entry = self._read_options().get(name)
        if not isinstance(entry, dict):
            return default
        return entry.get("value", default)

    def has(self, name: str) -> bool:
        return name in self._read_options()
