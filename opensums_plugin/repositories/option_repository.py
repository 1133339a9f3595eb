"""Repository for option persistence (DB-backed)."""
from datetime import datetime
from typing import Any, Optional
from opensums_plugin.models.option import Option
from opensums_plugin.plugins.option_store import OptionStore


class OptionRepository(OptionStore):
    """CRUD repository for Option rows. Each mutation commits on its own."""

    def __init__(self, session):
        self._session = session

    def _find(self, name: str) -> Optional[Option]:
        return (
            self._session.query(Option)
            .filter(Option.option_name == name)
            .first()
        )

    def add(self, name: str, value: Any, autoload: bool = False) -> bool:
        """Create option row if it does not exist."""
        if self._find(name):
            return False

        now = datetime.utcnow()
        row = Option(
            option_name=name,
            option_value=value,
            autoload=autoload,
            created_at=now,
            updated_at=now,
        )
        self._session.add(row)
        self._session.commit()
        return True

    def update(self, name: str, value: Any) -> bool:
        """Update option row, creating it when absent."""
        existing = self._find(name)
        now = datetime.utcnow()

        if existing:
            existing.option_value = value
            existing.updated_at = now
            self._session.commit()
            return True

        row = Option(
            option_name=name,
            option_value=value,
            autoload=True,
            created_at=now,
            updated_at=now,
        )
        self._session.add(row)
        self._session.commit()
        return True

    def delete(self, name: str) -> bool:
        """Delete option row by name."""
        existing = self._find(name)
        if existing:
            self._session.delete(existing)
            self._session.commit()
            return True
        return False

    def get(self, name: str, default: Any = None) -> Any:
        """Get option value by name."""
        row = self._find(name)
        if not row:
            return default
        return row.option_value

    def has(self, name: str) -> bool:
        return self._find(name) is not None
