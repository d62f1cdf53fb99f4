"""Account domain dependencies.

Each request opens the account store from the durable slot and binds the
account id kept in the signed session cookie as the current account.
"""

from typing import Annotated

from fastapi import Depends, Request

from winning.account.exceptions import (
    AccountNotActiveError,
    AdminRequiredError,
    NotAuthenticatedError,
)
from winning.account.models import Account, AccountStatus
from winning.account.store import AccountStore
from winning.core.deps import SettingsDep, SlotDep

SESSION_ACCOUNT_KEY = "account_id"


def get_store(request: Request, slot: SlotDep, settings: SettingsDep) -> AccountStore:
    return AccountStore.open(
        slot,
        key=settings.storage_key,
        admin_email=settings.admin_email,
        current_id=request.session.get(SESSION_ACCOUNT_KEY),
        strict=settings.strict_transitions,
    )


StoreDep = Annotated[AccountStore, Depends(get_store)]


def remember_current(request: Request, store: AccountStore) -> None:
    """Copy the store's current account into the session cookie."""
    current = store.current
    if current is None:
        request.session.pop(SESSION_ACCOUNT_KEY, None)
    else:
        request.session[SESSION_ACCOUNT_KEY] = current.id


def get_current_account(store: StoreDep) -> Account:
    """Return the current account.

    Raises:
        NotAuthenticatedError: If the session has no (or a stale) account id
    """
    account = store.current
    if account is None:
        raise NotAuthenticatedError()
    return account


CurrentAccountDep = Annotated[Account, Depends(get_current_account)]


def get_admin_account(account: CurrentAccountDep) -> Account:
    if not account.is_admin:
        raise AdminRequiredError()
    return account


AdminAccountDep = Annotated[Account, Depends(get_admin_account)]


def require_admin(_account: AdminAccountDep) -> None:
    """Require admin privileges without injecting the account.

    Use as a router-level dependency:
        router = APIRouter(dependencies=[Depends(require_admin)])
    """
    pass  # Admin check already validated by AdminAccountDep


def get_active_account(account: CurrentAccountDep) -> Account:
    """Return the current account if it is an approved, non-admin user."""
    if account.is_admin or account.status != AccountStatus.active:
        raise AccountNotActiveError()
    return account


ActiveAccountDep = Annotated[Account, Depends(get_active_account)]
