"""Session domain router.

Tells the client which screen to render for its current session.
"""

from fastapi import APIRouter

from winning.account.dependencies import StoreDep
from winning.account.onboarding import whatsapp_link
from winning.account.schemas import AccountRead
from winning.core.constants import Routes
from winning.core.deps import SettingsDep
from winning.session.schemas import ViewRead
from winning.session.selector import Nav, View, select_view

router = APIRouter(prefix=Routes.SESSION.prefix, tags=[Routes.SESSION.tag])


@router.get("/view", response_model=ViewRead)
async def current_view(store: StoreDep, settings: SettingsDep, nav: Nav = Nav.landing):
    account = store.current
    view = select_view(account, nav)
    if account is None:
        return ViewRead(view=view)

    result = ViewRead(view=view, account=AccountRead.from_account(account))
    if view == View.status_page:
        result.status = account.status
        result.rejection_reason = account.rejection_reason
        result.support_url = whatsapp_link(
            settings.support_whatsapp,
            f"Hello, I signed up as {account.email}, please review my account. "
            f"Current status: {account.status.value}",
        )
    return result
