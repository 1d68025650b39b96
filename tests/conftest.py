import asyncio
import json
from typing import Any, List, Optional

import pytest

from fit_evaluator.agent.providers.base import Provider

VALID_BODY = {
    "fitScore": 82,
    "analysis": "Strong match.",
    "strengths": ["React"],
    "missing": [],
}


class StubProvider(Provider):
    """
    Scripted provider. Each call consumes the next outcome; the last outcome
    repeats. An outcome is a string to return, an exception to raise, or a
    float meaning "sleep this many seconds, then continue with the next one".
    """

    def __init__(self, *outcomes: Any):
        self.outcomes: List[Any] = list(outcomes)
        self.calls: List[tuple] = []
        self.cancelled = False
        self.healthy = True

    async def __call__(self, prompt: str, format: Optional[str] = None) -> str:
        self.calls.append((prompt, format))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, float):
            try:
                await asyncio.sleep(outcome)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
            return json.dumps(VALID_BODY)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def healthcheck(self) -> None:
        if not self.healthy:
            from fit_evaluator.agent.exceptions import TransportFailure

            raise TransportFailure("model not installed")


@pytest.fixture
def valid_body() -> str:
    return json.dumps(VALID_BODY)


@pytest.fixture
def make_provider():
    return StubProvider
