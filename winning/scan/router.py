"""Scan domain router."""

from fastapi import APIRouter

from winning.account.dependencies import ActiveAccountDep
from winning.core.constants import CommonResponses, Routes
from winning.scan.schemas import ScanRequest, ScanResult
from winning.scan.service import ScanServiceDep

router = APIRouter(
    prefix=Routes.SCAN.prefix,
    tags=[Routes.SCAN.tag],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.post(
    "",
    response_model=ScanResult,
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.BAD_GATEWAY},
)
async def run_scan(body: ScanRequest, account: ActiveAccountDep, service: ScanServiceDep):
    """Scan for winning products. Only approved accounts may scan."""
    return await service.scan(account.id, body)
