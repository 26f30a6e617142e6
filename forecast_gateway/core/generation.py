from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from .errors import ParseError, UpstreamError
from .parsing import FORECAST_PARSER, ForecastOutputParser
from .prompt import build_prompt
from .types import ForecastResult, ResponseMode

if TYPE_CHECKING:
    from forecast_gateway.config import Settings

logger = logging.getLogger(__name__)

_LOGGED_OUTPUT_LIMIT = 500
_TEXT_PARSER = StrOutputParser()


class ForecastRequester:
    """Send rendered forecast prompts to the completion service.

    One outbound call per request, no retries. In structured mode the
    completion is parsed into a `Forecast`; in raw mode it is returned as is.
    """

    def __init__(
        self,
        model: Runnable[Any, Any],
        mode: ResponseMode = ResponseMode.STRUCTURED,
        parser: ForecastOutputParser = FORECAST_PARSER,
    ) -> None:
        self.model = model
        self.mode = mode
        self.parser = parser

    async def forecast(self, location: str) -> ForecastResult:
        return await self.request(build_prompt(location))

    async def request(self, prompt: str) -> ForecastResult:
        text = await self._complete(prompt)

        if self.mode is ResponseMode.RAW:
            return text

        try:
            return self.parser.parse(text)
        except OutputParserException as exc:
            logger.warning(
                "Discarding completion that does not match the forecast format: %r",
                text[:_LOGGED_OUTPUT_LIMIT],
            )
            raise ParseError() from exc

    async def _complete(self, prompt: str) -> str:
        try:
            output = await self.model.ainvoke(prompt)
        except Exception as exc:
            raise UpstreamError() from exc

        if isinstance(output, str):
            return output
        # chat models hand back messages
        return _TEXT_PARSER.invoke(output)


def build_completion_model(settings: "Settings") -> Runnable[Any, str]:
    chat_model = ChatOpenAI(
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        api_key=settings.require_api_key(),
        base_url=settings.openai_base_url,
        max_retries=0,
    )
    return chat_model | StrOutputParser()
