"""Account store.

Owns the ordered account collection and the current account of one session.
Every mutation serializes the whole collection into the durable slot before
the in-memory state changes, so a failed write leaves the store untouched.
"""

import logging
from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from winning.account.exceptions import (
    AccountNotModerableError,
    EmailExistsError,
    InvalidTransitionError,
    NotAuthenticatedError,
)
from winning.account.models import Account, AccountDocument, AccountRole, AccountStatus
from winning.account.schemas import ProfileUpdate
from winning.account.transitions import can_transition
from winning.core.exceptions import PersistenceError
from winning.storage.slot import KeyValueSlot

logger = logging.getLogger(__name__)

SEED_ADMIN_ID = "admin-id"


class AccountStore:
    """Single owner of account state for one running session.

    Views read ``accounts`` and ``current`` and mutate only through
    signup, login, update_profile, admin_action and logout.
    """

    def __init__(
        self,
        slot: KeyValueSlot,
        *,
        key: str,
        accounts: Sequence[Account] = (),
        current_id: str | None = None,
        strict: bool = True,
    ) -> None:
        self._slot = slot
        self._key = key
        self._accounts: tuple[Account, ...] = tuple(accounts)
        self._current_id = current_id
        self.strict = strict

    @classmethod
    def open(
        cls,
        slot: KeyValueSlot,
        *,
        key: str,
        admin_email: str,
        current_id: str | None = None,
        strict: bool = True,
    ) -> "AccountStore":
        """Rehydrate from the slot, seeding the admin account on first run.

        A persisted document is loaded verbatim, even when its user list is
        empty; only a missing slot triggers the seed.
        """
        raw = slot.read(key)
        if raw is None:
            store = cls(slot, key=key, current_id=current_id, strict=strict)
            admin = Account(
                id=SEED_ADMIN_ID,
                email=admin_email,
                role=AccountRole.admin,
                status=AccountStatus.active,
            )
            store._commit((admin,))
            logger.info("Seeded admin account %s", admin_email)
            return store

        try:
            document = AccountDocument.from_json(raw)
        except PydanticValidationError as e:
            logger.error("Stored account document under %s is corrupt", key)
            raise PersistenceError("Stored account document is corrupt") from e
        return cls(
            slot, key=key, accounts=document.users, current_id=current_id, strict=strict
        )

    @property
    def accounts(self) -> tuple[Account, ...]:
        return self._accounts

    @property
    def current(self) -> Account | None:
        if self._current_id is None:
            return None
        return self.get(self._current_id)

    def get(self, account_id: str) -> Account | None:
        for account in self._accounts:
            if account.id == account_id:
                return account
        return None

    def find_by_email(self, email: str) -> Account | None:
        """Return the first account registered with exactly this email."""
        for account in self._accounts:
            if account.email == email:
                return account
        return None

    def to_document(self) -> AccountDocument:
        return AccountDocument(users=list(self._accounts))

    def signup(self, email: str) -> Account:
        """Register a new user account and make it current.

        Raises:
            EmailExistsError: If an account already uses this email
        """
        if self.find_by_email(email) is not None:
            raise EmailExistsError()

        account = Account(email=email)
        self._commit((*self._accounts, account))
        self._current_id = account.id
        logger.info(
            "Account signed up: %s",
            email,
            extra={"account_id": account.id, "account_status": account.status.value},
        )
        return account

    def login(self, email: str) -> bool:
        """Make the first account with this email current.

        Returns False and leaves the current account unchanged when no
        account matches. There is no credential check.
        """
        account = self.find_by_email(email)
        if account is None:
            logger.info("Login failed for unknown email %s", email)
            return False
        self._current_id = account.id
        logger.info("Account logged in: %s", email, extra={"account_id": account.id})
        return True

    def update_profile(self, changes: ProfileUpdate) -> Account:
        """Merge the set fields of changes into the current account.

        Field values are taken as-is; format checks belong to the caller.

        Raises:
            NotAuthenticatedError: If there is no current account
        """
        current = self.current
        if current is None:
            raise NotAuthenticatedError()

        update_data = changes.model_dump(exclude_unset=True)
        updated = Account.model_validate({**current.model_dump(), **update_data})
        self._commit(self._replace(updated))
        logger.info(
            "Profile updated: %s",
            ", ".join(sorted(update_data)) or "no fields",
            extra={"account_id": updated.id, "account_status": updated.status.value},
        )
        return updated

    def admin_action(
        self,
        account_id: str,
        status: AccountStatus,
        reason: str | None = None,
    ) -> Account | None:
        """Set the status of another account.

        The rejection reason is kept only for ``rejected`` and cleared for any
        other target status. Unknown ids are a no-op and return None.

        Raises:
            AccountNotModerableError: If the target is an admin account
            InvalidTransitionError: If strict and the move is not allowed
        """
        target = self.get(account_id)
        if target is None:
            logger.debug("Admin action ignored for unknown account %s", account_id)
            return None
        if target.is_admin:
            raise AccountNotModerableError()
        if self.strict and not can_transition(target.status, status):
            raise InvalidTransitionError(target.status.value, status.value)

        updated = target.model_copy(
            update={
                "status": status,
                "rejection_reason": reason if status == AccountStatus.rejected else None,
            }
        )
        self._commit(self._replace(updated))
        logger.info(
            "Account %s moved from %s to %s",
            target.email,
            target.status.value,
            status.value,
            extra={"account_id": account_id, "account_status": status.value},
        )
        return updated

    def logout(self) -> None:
        self._current_id = None

    def _replace(self, updated: Account) -> tuple[Account, ...]:
        return tuple(updated if a.id == updated.id else a for a in self._accounts)

    def _commit(self, accounts: tuple[Account, ...]) -> None:
        document = AccountDocument(users=list(accounts))
        self._slot.write(self._key, document.to_json())
        self._accounts = accounts
