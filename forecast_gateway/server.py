from __future__ import annotations

import logging
import sys

import uvicorn

from forecast_gateway.config import load_settings
from forecast_gateway.core.errors import ConfigurationError
from forecast_gateway.logging_config import configure_logging
from forecast_gateway.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except ConfigurationError as exc:
        logger.error("%s Exiting...", exc)
        sys.exit(1)

    logger.info(
        "Server is running on http://localhost:%s (response_mode=%s, model=%s)",
        settings.port,
        settings.forecast_response_mode.value,
        settings.openai_model,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
