"""Health domain router.

Health check endpoint for monitoring and load balancers.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from winning.core.constants import Routes
from winning.core.deps import SettingsDep, SlotDep
from winning.core.exceptions import PersistenceError

router = APIRouter(prefix=Routes.HEALTH.prefix, tags=[Routes.HEALTH.tag])


@router.get("")
async def health(slot: SlotDep, settings: SettingsDep):
    """Health check that verifies the account slot can be read."""
    try:
        seeded = slot.read(settings.storage_key) is not None
    except PersistenceError:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "storage": "error"},
        )
    return {"status": "ok", "storage": "ok", "seeded": seeded}
