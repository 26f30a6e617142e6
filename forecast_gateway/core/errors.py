from __future__ import annotations

from dataclasses import dataclass

MISSING_LOCATION_MESSAGE = "Please provide a location in the request body."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is absent."""


@dataclass
class GatewayError(Exception):
    status_code: int
    message: str
    code: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_error(self) -> dict[str, str]:
        if self.status_code >= 500:
            return {"error": INTERNAL_ERROR_MESSAGE}
        return {"error": self.message}


@dataclass
class ValidationError(GatewayError):
    status_code: int = 400
    message: str = MISSING_LOCATION_MESSAGE
    code: str | None = "missing_location"


@dataclass
class UpstreamError(GatewayError):
    status_code: int = 500
    message: str = "Completion service request failed."
    code: str | None = "upstream_error"


@dataclass
class ParseError(GatewayError):
    status_code: int = 500
    message: str = "Completion could not be parsed into a forecast."
    code: str | None = "parse_error"


@dataclass
class TemplateError(GatewayError):
    status_code: int = 500
    message: str = "Forecast prompt could not be rendered."
    code: str | None = "template_error"
