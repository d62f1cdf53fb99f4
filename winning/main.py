from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from winning.account.store import AccountStore
from winning.core.exception_handlers import register_exception_handlers
from winning.core.http import close_scan_client
from winning.core.logging import configure_logging
from winning.core.middleware import add_cors_middleware, add_session_middleware
from winning.core.request_logging import add_request_logging_middleware
from winning.core.settings import get_settings
from winning.db.engine import create_db_and_tables, engine
from winning.router import api_router
from winning.storage.slot import SqlSlot

configure_logging()


def init_account_store() -> None:
    """Create the slot table and seed the admin account on first run."""
    settings = get_settings()
    create_db_and_tables()
    with Session(engine) as session:
        AccountStore.open(
            SqlSlot(session),
            key=settings.storage_key,
            admin_email=settings.admin_email,
        )


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_account_store()
    yield
    await close_scan_client()


app = FastAPI(title="Winning Products DZ", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_session_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)
