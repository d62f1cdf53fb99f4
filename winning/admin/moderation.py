"""Read models for the admin moderation table."""

from pydantic import BaseModel

from winning.account.models import Account, AccountStatus
from winning.account.onboarding import whatsapp_link
from winning.account.schemas import AccountRead
from winning.account.transitions import ModerationAction, available_actions

CONTACT_MESSAGE = "Hello, about your Winning Products DZ account..."
DEFAULT_REJECTION_REASON = "Payment not received"


class ModerationRow(AccountRead):
    actions: list[ModerationAction]
    contact_url: str | None = None


class ModerationStats(BaseModel):
    total: int
    pending: int
    active: int


def moderation_rows(
    accounts: tuple[Account, ...], status: AccountStatus | None = None
) -> list[ModerationRow]:
    """Non-admin accounts in signup order, optionally filtered by status."""
    rows = []
    for account in accounts:
        if account.is_admin:
            continue
        if status is not None and account.status != status:
            continue
        rows.append(
            ModerationRow(
                **AccountRead.from_account(account).model_dump(),
                actions=available_actions(account.status),
                contact_url=(
                    whatsapp_link(account.whatsapp, CONTACT_MESSAGE)
                    if account.whatsapp
                    else None
                ),
            )
        )
    return rows


def moderation_stats(accounts: tuple[Account, ...]) -> ModerationStats:
    users = [a for a in accounts if not a.is_admin]
    return ModerationStats(
        total=len(users),
        pending=sum(1 for a in users if a.status == AccountStatus.pending),
        active=sum(1 for a in users if a.status == AccountStatus.active),
    )
