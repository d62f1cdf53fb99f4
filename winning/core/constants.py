"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    AUTH = RouteConfig(prefix="/auth", tag="auth")
    ACCOUNT = RouteConfig(prefix="/accounts", tag="accounts")
    ADMIN = RouteConfig(prefix="/admin", tag="admin")
    SESSION = RouteConfig(prefix="/session", tag="session")
    SCAN = RouteConfig(prefix="/scans", tag="scans")
    HEALTH = RouteConfig(prefix="/health", tag="health")


class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {"description": "Not authenticated or unknown email"}
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {"description": "Account lacks the required role or status"}
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {404: {"description": "Resource not found"}}
    CONFLICT: dict[int, dict[str, Any]] = {
        409: {"description": "Resource already exists or transition not allowed"}
    }
    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"description": "Invalid request data"}
    }
    BAD_GATEWAY: dict[int, dict[str, Any]] = {
        502: {"description": "Upstream workflow and fallback both failed"}
    }
