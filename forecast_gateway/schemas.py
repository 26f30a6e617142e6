from __future__ import annotations

from pydantic import BaseModel

from forecast_gateway.core.types import ForecastResult


class ForecastRequest(BaseModel):
    location: str | None = None


class ForecastResponse(BaseModel):
    result: ForecastResult


class ErrorResponse(BaseModel):
    error: str
