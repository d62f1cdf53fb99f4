"""Account domain routers.

Signup, login and logout under /auth; the onboarding steps of the current
account under /accounts. Handlers stay thin and delegate to the store.
"""

from fastapi import APIRouter, Request, status

from winning.account.dependencies import (
    CurrentAccountDep,
    StoreDep,
    remember_current,
)
from winning.account.exceptions import UnknownEmailError
from winning.account.onboarding import PLANS, choose_plan, submit_contact
from winning.account.schemas import (
    AccountRead,
    ContactRequest,
    LoginRequest,
    Plan,
    PlanRequest,
    SignupRequest,
)
from winning.core.constants import CommonResponses, Routes

auth_router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)

router = APIRouter(
    prefix=Routes.ACCOUNT.prefix,
    tags=[Routes.ACCOUNT.tag],
    responses={**CommonResponses.UNAUTHORIZED},
)


@auth_router.post(
    "/signup",
    response_model=AccountRead,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
async def signup(body: SignupRequest, request: Request, store: StoreDep):
    """Create a user account with status ``new`` and log it in."""
    account = store.signup(body.email)
    remember_current(request, store)
    return AccountRead.from_account(account)


@auth_router.post(
    "/login",
    response_model=AccountRead,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def login(body: LoginRequest, request: Request, store: StoreDep):
    """Log in by email. No password is checked."""
    if not store.login(body.email):
        raise UnknownEmailError()
    remember_current(request, store)
    return AccountRead.from_account(store.current)


@auth_router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(request: Request, store: StoreDep):
    store.logout()
    remember_current(request, store)


@router.get("/me", response_model=AccountRead)
async def read_me(account: CurrentAccountDep):
    return AccountRead.from_account(account)


@router.get("/plans", response_model=list[Plan])
async def list_plans():
    """Subscription plans offered at onboarding."""
    return list(PLANS.values())


@router.post("/me/plan", response_model=AccountRead)
async def set_plan(body: PlanRequest, _account: CurrentAccountDep, store: StoreDep):
    """Choose the subscription plan (once)."""
    return AccountRead.from_account(choose_plan(store, body.plan))


@router.post("/me/contact", response_model=AccountRead)
async def set_contact(
    body: ContactRequest, _account: CurrentAccountDep, store: StoreDep
):
    """Submit the WhatsApp number and queue the account for approval."""
    return AccountRead.from_account(submit_contact(store, body.whatsapp))
