"""Storage domain models.

SQLModel table definition for named key-value slots.
"""

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from winning.core.mixins import TimestampMixin


class StorageSlot(TimestampMixin, SQLModel, table=True):
    """One named slot holding one serialized document.

    The value is always replaced wholesale; there is no partial update path.
    """

    __tablename__: str = "storage_slots"

    key: str = Field(primary_key=True, max_length=100)
    value: str = Field(sa_column=Column(Text, nullable=False))
