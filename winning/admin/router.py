"""Admin domain router.

Moderation table and status changes. Every route requires the current
account to be an admin.
"""

from fastapi import APIRouter, Depends

from winning.account.dependencies import StoreDep, require_admin
from winning.account.models import AccountStatus
from winning.account.schemas import AccountRead
from winning.admin.moderation import (
    DEFAULT_REJECTION_REASON,
    ModerationRow,
    ModerationStats,
    moderation_rows,
    moderation_stats,
)
from winning.admin.schemas import AdminActionRequest
from winning.core.constants import CommonResponses, Routes
from winning.core.exceptions import NotFoundError

router = APIRouter(
    prefix=Routes.ADMIN.prefix,
    tags=[Routes.ADMIN.tag],
    dependencies=[Depends(require_admin)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.get("/accounts", response_model=list[ModerationRow])
async def list_accounts(store: StoreDep, status: AccountStatus | None = None):
    """Non-admin accounts in signup order, optionally filtered by status."""
    return moderation_rows(store.accounts, status)


@router.get("/stats", response_model=ModerationStats)
async def stats(store: StoreDep):
    return moderation_stats(store.accounts)


@router.patch(
    "/accounts/{account_id}",
    response_model=AccountRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
async def moderate_account(
    account_id: str, body: AdminActionRequest, store: StoreDep
):
    """Change an account's status.

    Rejections without a reason get the default one. The store treats an
    unknown id as a no-op; over HTTP that is reported as 404.
    """
    reason = body.reason
    if body.status == AccountStatus.rejected and not reason:
        reason = DEFAULT_REJECTION_REASON
    updated = store.admin_action(account_id, body.status, reason)
    if updated is None:
        raise NotFoundError("Account not found")
    return AccountRead.from_account(updated)
