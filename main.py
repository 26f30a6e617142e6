import sys

from forecast_gateway.config import load_settings
from forecast_gateway.core.errors import ConfigurationError, GatewayError
from forecast_gateway.core.generation import ForecastRequester, build_completion_model


async def main(location: str):
    settings = load_settings()

    try:
        model = build_completion_model(settings)
    except ConfigurationError as exc:
        print(f"Forecast service not configured: {exc}")
        return 1

    requester = ForecastRequester(model=model, mode=settings.forecast_response_mode)

    try:
        result = await requester.forecast(location)
    except GatewayError as exc:
        print(f"Forecast failed: {exc}")
        return 1

    print(f"Forecast for {location}: {result}")
    return 0

if __name__ == "__main__":
    import asyncio
    sys.exit(asyncio.run(main(" ".join(sys.argv[1:]) or "Paris")))
