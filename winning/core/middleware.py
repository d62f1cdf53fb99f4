"""Cross-cutting Starlette middleware wiring (CORS and signed sessions)."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from winning.core.settings import get_settings

SESSION_COOKIE = "winning_session"


def add_cors_middleware(app: FastAPI) -> None:
    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def add_session_middleware(app: FastAPI) -> None:
    """Keep the current account id in a signed cookie.

    The cookie only carries an opaque account id; the account itself is
    always re-read from the durable slot.
    """
    settings = get_settings()

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=SESSION_COOKIE,
        same_site="lax",
        https_only=settings.is_secure_cookie,
    )
