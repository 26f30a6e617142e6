from __future__ import annotations

import json
import re
from typing import Any

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from langchain_core.utils.json import parse_json_markdown
from pydantic import ValidationError as PydanticValidationError

from .types import Forecast

_LINE_RE = re.compile(
    r"^(?:[-*]\s+)?\**(?P<key>[A-Za-z_]+)\**\s*:\s*\**\s*(?P<value>.*)$"
)


class ForecastOutputParser(BaseOutputParser[Forecast]):
    """Parse a completion into a `Forecast`.

    The model is asked for one `field: value` line per forecast field. A JSON
    object, bare or in a markdown code fence anywhere in the text, is accepted
    as well.
    """

    def get_format_instructions(self) -> str:
        lines = [
            "Respond with exactly one line per field below, written as "
            "`field: value`, and no other text.",
        ]
        for name, field in Forecast.model_fields.items():
            lines.append(f"{name}: <{field.description}>")
        return "\n".join(lines)

    def parse(self, text: str) -> Forecast:
        if "{" in text:
            fields = _fields_from_json(text)
        else:
            fields = _fields_from_lines(text)

        try:
            return Forecast.model_validate(fields)
        except PydanticValidationError as exc:
            raise OutputParserException(
                f"Completion does not match the forecast format: {exc}",
                llm_output=text,
            ) from exc

    @property
    def _type(self) -> str:
        return "forecast_output_parser"


def _fields_from_lines(text: str) -> dict[str, str]:
    known = set(Forecast.model_fields)
    fields: dict[str, str] = {}

    for raw_line in text.splitlines():
        match = _LINE_RE.match(raw_line.strip())
        if match is None:
            continue

        key = match.group("key").lower()
        if key not in known or key in fields:
            continue

        fields[key] = match.group("value").strip().strip("*\"'").strip()

    return fields


def _fields_from_json(text: str) -> dict[str, Any]:
    try:
        data = parse_json_markdown(text)
    except (json.JSONDecodeError, ValueError) as exc:
        raise OutputParserException(
            f"Completion is not valid JSON: {exc}",
            llm_output=text,
        ) from exc

    if not isinstance(data, dict):
        raise OutputParserException(
            "Completion JSON is not an object.",
            llm_output=text,
        )

    return {
        key: str(value)
        for key, value in data.items()
        if key in Forecast.model_fields and value is not None
    }


FORECAST_PARSER = ForecastOutputParser()
FORMAT_INSTRUCTIONS = FORECAST_PARSER.get_format_instructions()
