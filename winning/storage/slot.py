"""Key-value slot backends.

A slot stores one text document under one key. Writers overwrite the whole
value; concurrent writers race and the last commit wins.
"""

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from winning.core.exceptions import PersistenceError
from winning.storage.models import StorageSlot

logger = logging.getLogger(__name__)


class KeyValueSlot(Protocol):
    """Protocol for durable key-value slots."""

    def read(self, key: str) -> str | None:
        """Return the stored text, or None when the key was never written."""
        ...

    def write(self, key: str, value: str) -> None:
        """Replace the stored text for key."""
        ...


class MemorySlot:
    """Process-local slot backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.values.get(key)

    def write(self, key: str, value: str) -> None:
        self.values[key] = value


class SqlSlot:
    """Slot stored as a single row of the storage_slots table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def read(self, key: str) -> str | None:
        try:
            row = self._session.get(StorageSlot, key)
        except SQLAlchemyError as e:
            logger.error("Failed to read slot %s: %s", key, e)
            raise PersistenceError("Failed to read application state") from e
        return row.value if row is not None else None

    def write(self, key: str, value: str) -> None:
        try:
            row = self._session.get(StorageSlot, key)
            if row is None:
                row = StorageSlot(key=key, value=value)
            else:
                row.value = value
            self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to write slot %s: %s", key, e)
            raise PersistenceError() from e
