from pydantic import BaseModel

from winning.account.models import AccountStatus
from winning.account.schemas import AccountRead
from winning.session.selector import View


class ViewRead(BaseModel):
    """Screen to render plus the data that screen needs."""

    view: View
    account: AccountRead | None = None
    status: AccountStatus | None = None
    rejection_reason: str | None = None
    support_url: str | None = None
