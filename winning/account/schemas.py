"""Account domain schemas.

Request and response schemas for account operations.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from winning.account.models import Account, AccountRole, AccountStatus


class ProfileUpdate(BaseModel):
    """Fields an account may merge into its own record.

    Identity (id, email), role and audit fields are deliberately absent.
    """

    model_config = ConfigDict(extra="forbid")

    whatsapp: str | None = None
    plan: str | None = None
    status: AccountStatus | None = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value: AccountStatus | None) -> AccountStatus:
        if value is None:
            raise ValueError("status cannot be cleared")
        return value


class SignupRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)


class PlanRequest(BaseModel):
    plan: str = Field(min_length=1, max_length=50)


class ContactRequest(BaseModel):
    whatsapp: str = Field(min_length=1, max_length=20)


class AccountRead(BaseModel):
    """Response schema for an account."""

    id: str
    email: str
    whatsapp: str | None = None
    plan: str | None = None
    status: AccountStatus
    role: AccountRole
    created_at: datetime
    rejection_reason: str | None = None

    @classmethod
    def from_account(cls, account: Account) -> "AccountRead":
        return cls.model_validate(account.model_dump())


class Plan(BaseModel):
    """A subscription plan offered at onboarding."""

    id: str
    price_dzd: int
    period: str
