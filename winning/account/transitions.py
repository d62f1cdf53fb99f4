"""Account status transition policy.

Only admin-initiated moves are listed here. ``new -> pending`` belongs to
the onboarding flow (contact submission) and is never an admin action.
"""

from enum import Enum

from winning.account.models import AccountStatus


class ModerationAction(str, Enum):
    approve = "approve"
    reject = "reject"
    suspend = "suspend"
    reactivate = "reactivate"


ACTION_TARGETS: dict[ModerationAction, AccountStatus] = {
    ModerationAction.approve: AccountStatus.active,
    ModerationAction.reject: AccountStatus.rejected,
    ModerationAction.suspend: AccountStatus.suspended,
    ModerationAction.reactivate: AccountStatus.active,
}

ADMIN_TRANSITIONS: dict[AccountStatus, dict[AccountStatus, ModerationAction]] = {
    AccountStatus.pending: {
        AccountStatus.active: ModerationAction.approve,
        AccountStatus.rejected: ModerationAction.reject,
    },
    AccountStatus.active: {
        AccountStatus.suspended: ModerationAction.suspend,
    },
    AccountStatus.suspended: {
        AccountStatus.active: ModerationAction.reactivate,
    },
    AccountStatus.rejected: {
        AccountStatus.active: ModerationAction.reactivate,
    },
}


def can_transition(current: AccountStatus, target: AccountStatus) -> bool:
    return target in ADMIN_TRANSITIONS.get(current, {})


def available_actions(status: AccountStatus) -> list[ModerationAction]:
    """Admin actions offered for an account in the given status."""
    return list(ADMIN_TRANSITIONS.get(status, {}).values())
