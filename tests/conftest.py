from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient
from langchain_core.runnables import RunnableLambda

from forecast_gateway.config import Settings
from forecast_gateway.core.types import ResponseMode
from forecast_gateway.main import create_app

PARIS_COMPLETION = "location: Paris\ntemperature: 18C\ncondition: Cloudy"


class StubCompletion:
    """Stands in for the completion service and records every prompt it sees."""

    def __init__(self, reply: Any = PARIS_COMPLETION, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def _complete(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def runnable(self) -> RunnableLambda:
        return RunnableLambda(self._complete)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"openai_api_key": "test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def stub() -> StubCompletion:
    return StubCompletion()


@pytest.fixture()
def make_client(stub: StubCompletion) -> Callable[..., TestClient]:
    def factory(mode: ResponseMode = ResponseMode.STRUCTURED) -> TestClient:
        app = create_app(make_settings(forecast_response_mode=mode), model=stub.runnable)
        return TestClient(app)

    return factory


@pytest.fixture()
def client(make_client) -> TestClient:
    return make_client()
