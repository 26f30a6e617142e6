from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from forecast_gateway.core.errors import ValidationError
from forecast_gateway.core.generation import ForecastRequester
from forecast_gateway.dependencies import get_forecast_requester
from forecast_gateway.schemas import ErrorResponse, ForecastRequest, ForecastResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["forecast"])


@router.post(
    "/forecast",
    response_model=ForecastResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def forecast(
    payload: ForecastRequest,
    requester: ForecastRequester = Depends(get_forecast_requester),
) -> ForecastResponse:
    if not payload.location:
        logger.info("Rejected forecast request without a location")
        raise ValidationError()

    result = await requester.forecast(payload.location)
    return ForecastResponse(result=result)
