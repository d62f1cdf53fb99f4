"""Onboarding policy applied on top of the account store.

A user picks a plan once, then submits a WhatsApp number; the number and
the move to ``pending`` are written together in one profile update.
"""

import re
from urllib.parse import quote

from winning.account.exceptions import (
    ContactAlreadySubmittedError,
    InvalidContactNumberError,
    NotAuthenticatedError,
    PlanAlreadySetError,
    PlanRequiredError,
    UnknownPlanError,
)
from winning.account.models import Account, AccountStatus
from winning.account.schemas import Plan, ProfileUpdate
from winning.account.store import AccountStore

# Algerian mobile numbers: +213 followed by 5, 6 or 7 and eight digits.
CONTACT_NUMBER_RE = re.compile(r"^\+213[567]\d{8}$")

PLANS: dict[str, Plan] = {
    "yearly_1000": Plan(id="yearly_1000", price_dzd=1000, period="year"),
}


def is_valid_contact_number(number: str) -> bool:
    return CONTACT_NUMBER_RE.fullmatch(number) is not None


def whatsapp_link(number: str, message: str = "") -> str:
    """Build a wa.me chat link for a +E.164 number."""
    return f"https://wa.me/{number.replace('+', '')}?text={quote(message, safe='')}"


def choose_plan(store: AccountStore, plan: str) -> Account:
    current = store.current
    if current is None:
        raise NotAuthenticatedError()
    if plan not in PLANS:
        raise UnknownPlanError(plan)
    if current.plan is not None:
        raise PlanAlreadySetError()
    return store.update_profile(ProfileUpdate(plan=plan))


def submit_contact(store: AccountStore, number: str) -> Account:
    """Record the contact number and queue the account for admin review."""
    current = store.current
    if current is None:
        raise NotAuthenticatedError()
    if current.plan is None:
        raise PlanRequiredError()
    if current.status != AccountStatus.new or current.whatsapp is not None:
        raise ContactAlreadySubmittedError()
    number = number.strip()
    if not is_valid_contact_number(number):
        raise InvalidContactNumberError()
    return store.update_profile(
        ProfileUpdate(whatsapp=number, status=AccountStatus.pending)
    )
