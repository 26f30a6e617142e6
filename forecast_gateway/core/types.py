from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class ResponseMode(str, Enum):
    RAW = "raw"
    STRUCTURED = "structured"


class Forecast(BaseModel):
    location: str = Field(
        min_length=1,
        description="the location the forecast is for",
    )
    temperature: str = Field(
        min_length=1,
        description="the expected temperature, including its unit",
    )
    condition: str = Field(
        min_length=1,
        description="a short description of the weather condition",
    )

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


ForecastResult = Union[Forecast, str]
