from pydantic import BaseModel, Field

from winning.account.models import AccountStatus


class AdminActionRequest(BaseModel):
    """Target status for an account, with an optional rejection reason."""

    status: AccountStatus
    reason: str | None = Field(default=None, max_length=500)
