"""Centralized dependency type aliases for FastAPI routes.

Import shared dependencies from this single module:
    from winning.core.deps import SessionDep, SettingsDep, SlotDep
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from winning.core.settings import Settings, get_settings
from winning.db.engine import get_session
from winning.storage.slot import KeyValueSlot, SqlSlot

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_slot(session: SessionDep) -> KeyValueSlot:
    """Durable slot for the account document."""
    return SqlSlot(session)


SlotDep = Annotated[KeyValueSlot, Depends(get_slot)]
