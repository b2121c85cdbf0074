"""Test utilities: a fake LLM provider and context helpers.

The fake provider records every structured-generation call and answers
with a canned payload, a payload computed from the instruction, or an
exception, so flows can be exercised without network access.
"""

import asyncio
import copy
from collections.abc import Callable
from typing import Any

from pydantic import PrivateAttr

from taskpilot.core.context.context import FlowContext
from taskpilot.providers.llm.base import LLMProvider, LLMProviderSettings

Responder = Callable[[str, dict[str, Any], str], Any]


class FakeLLMProvider(LLMProvider[LLMProviderSettings]):
    """In-memory LLM provider for tests."""

    _payload: Any = PrivateAttr(default=None)
    _responder: Responder | None = PrivateAttr(default=None)
    _error: BaseException | None = PrivateAttr(default=None)
    _delay: float = PrivateAttr(default=0.0)
    _calls: list[dict[str, Any]] = PrivateAttr(default_factory=list)

    @classmethod
    def create(
        cls,
        payload: Any = None,
        *,
        responder: Responder | None = None,
        error: BaseException | None = None,
        delay: float = 0.0,
    ) -> "FakeLLMProvider":
        fake = cls(name="fake-llm", provider_type="llm", settings=LLMProviderSettings())
        fake._payload = payload
        fake._responder = responder
        fake._error = error
        fake._delay = delay
        return fake

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self._calls

    async def generate_structured(
        self,
        instruction: str,
        response_schema: dict[str, Any],
        model_name: str,
    ) -> Any:
        self._calls.append(
            {"instruction": instruction, "response_schema": response_schema, "model_name": model_name}
        )
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        if self._responder is not None:
            return self._responder(instruction, response_schema, model_name)
        return copy.deepcopy(self._payload)


def make_context(fake: FakeLLMProvider, model_name: str = "test-model", user_id: str | None = None) -> FlowContext:
    return FlowContext(fake, model_name, user_id=user_id)
