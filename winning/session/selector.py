"""Screen selection for a session.

Pure function of the current account and the anonymous navigation flag.
"""

from enum import Enum

from winning.account.models import Account, AccountStatus


class Nav(str, Enum):
    """Where an anonymous visitor asked to go."""

    landing = "landing"
    login = "login"
    signup = "signup"


class View(str, Enum):
    landing = "landing"
    login = "login"
    signup = "signup"
    admin_dashboard = "admin_dashboard"
    plan_selection = "plan_selection"
    contact_form = "contact_form"
    dashboard = "dashboard"
    status_page = "status_page"
    error = "error"


_STATUS_PAGE = {AccountStatus.pending, AccountStatus.rejected, AccountStatus.suspended}


def select_view(account: Account | None, nav: Nav = Nav.landing) -> View:
    """Pick the screen to show.

    Onboarding gates are checked in order: plan, then contact number, then
    approval status.
    """
    if account is None:
        return View(nav.value)
    if account.is_admin:
        return View.admin_dashboard
    if not account.plan:
        return View.plan_selection
    if not account.whatsapp:
        return View.contact_form
    if account.status == AccountStatus.active:
        return View.dashboard
    if account.status in _STATUS_PAGE:
        return View.status_page
    return View.error
