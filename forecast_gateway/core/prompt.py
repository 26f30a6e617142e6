from __future__ import annotations

from langchain_core.prompts import PromptTemplate

from .errors import TemplateError
from .parsing import FORMAT_INSTRUCTIONS

FORECAST_TEMPLATE = """Provide a weather forecast for the following location: {location}.
Follow this output format:
{format_instructions}"""

FORECAST_PROMPT = PromptTemplate(
    template=FORECAST_TEMPLATE,
    input_variables=["location"],
    partial_variables={"format_instructions": FORMAT_INSTRUCTIONS},
)


def build_prompt(location: str, template: PromptTemplate = FORECAST_PROMPT) -> str:
    """Render the forecast prompt for `location`.

    The caller is responsible for rejecting empty locations.
    """

    try:
        return template.format(location=location)
    except (KeyError, IndexError, ValueError) as exc:
        raise TemplateError() from exc
