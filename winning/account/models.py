"""Account domain models.

Accounts are not table rows: the whole collection is serialized into one
durable slot as ``{"users": [...]}``. Field aliases give the camelCase keys
of that document; optional fields are omitted when unset.
"""

import uuid
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class AccountStatus(str, Enum):
    """Approval lifecycle of an account.

    - new: signed up, no plan or contact number yet
    - pending: contact number submitted, waiting for an admin
    - active: approved, may run product scans
    - rejected: refused by an admin (see rejection_reason)
    - suspended: previously active, blocked by an admin
    """

    new = "new"
    pending = "pending"
    active = "active"
    rejected = "rejected"
    suspended = "suspended"


class AccountRole(str, Enum):
    user = "user"
    admin = "admin"


def utc_now_ms() -> datetime:
    """Current UTC time truncated to milliseconds, the precision kept on disk."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def new_account_id() -> str:
    return str(uuid.uuid4())


class Account(BaseModel):
    """A registered identity.

    Instances are frozen; the store replaces records instead of mutating them.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    id: str = Field(default_factory=new_account_id)
    email: str
    whatsapp: str | None = None
    plan: str | None = None
    status: AccountStatus = AccountStatus.new
    role: AccountRole = AccountRole.user
    created_at: datetime = Field(default_factory=utc_now_ms, alias="createdAt")
    rejection_reason: str | None = Field(default=None, alias="rejectionReason")

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.admin

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Format as ISO 8601 UTC with milliseconds and a Z suffix.

        e.g. 2026-10-19T04:45:00.123Z
        """
        if value.tzinfo is not None:
            utc_value = value.astimezone(UTC)
        else:
            # Naive values are taken as UTC.
            utc_value = value.replace(tzinfo=UTC)
        return (
            utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        )


class AccountDocument(BaseModel):
    """Top-level shape of the persisted slot."""

    users: list[Account] = Field(default_factory=list)

    @classmethod
    def from_json(cls, raw: str) -> "AccountDocument":
        return cls.model_validate_json(raw)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
