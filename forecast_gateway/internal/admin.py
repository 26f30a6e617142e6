from __future__ import annotations

from fastapi import APIRouter, Depends

from forecast_gateway.core.generation import ForecastRequester
from forecast_gateway.dependencies import get_forecast_requester

router = APIRouter(prefix="/internal", tags=["internal"])


@router.get("/healthz")
async def healthz(
    requester: ForecastRequester = Depends(get_forecast_requester),
) -> dict[str, str]:
    return {"status": "ok", "response_mode": requester.mode.value}
