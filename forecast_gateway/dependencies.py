from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from forecast_gateway.core.errors import INTERNAL_ERROR_MESSAGE, GatewayError
from forecast_gateway.core.generation import ForecastRequester

logger = logging.getLogger(__name__)


def get_forecast_requester(request: Request) -> ForecastRequester:
    return request.app.state.forecast_requester


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GatewayError)
    async def handle_gateway_error(
        request: Request,
        exc: GatewayError,
    ) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s (code=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code,
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_error())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        _request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        first_error = exc.errors()[0]["msg"] if exc.errors() else "Invalid request"
        return JSONResponse(status_code=400, content={"error": first_error})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "%s %s raised an unexpected error",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})
