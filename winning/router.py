"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from winning.account.router import auth_router
from winning.account.router import router as account_router
from winning.admin.router import router as admin_router
from winning.health.router import router as health_router
from winning.scan.router import router as scan_router
from winning.session.router import router as session_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(account_router)
api_router.include_router(session_router)
api_router.include_router(admin_router)
api_router.include_router(scan_router)
