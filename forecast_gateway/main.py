from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from langchain_core.runnables import Runnable

from forecast_gateway.config import Settings, load_settings
from forecast_gateway.core.generation import ForecastRequester, build_completion_model
from forecast_gateway.dependencies import register_exception_handlers
from forecast_gateway.internal import admin
from forecast_gateway.routers import forecast


def create_app(
    settings: Settings | None = None,
    model: Runnable[Any, Any] | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    settings.require_api_key()

    app = FastAPI(
        title="forecast-gateway",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.forecast_requester = ForecastRequester(
        model=model if model is not None else build_completion_model(settings),
        mode=settings.forecast_response_mode,
    )

    register_exception_handlers(app)

    app.include_router(forecast.router)
    app.include_router(admin.router)

    return app
