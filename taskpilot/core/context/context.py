"""Explicit execution context for flow calls.

Everything a flow needs from its surroundings (which model provider to
call, which model to use, who is asking) travels in a FlowContext passed
into each call. Flows never read session state or provider handles from
module-level singletons, which keeps them testable with fixture contexts.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taskpilot.providers.llm.base import LLMProvider

logger = logging.getLogger(__name__)


class FlowContext:
    """Per-call context handed to every flow.

    A context holds no mutable state of its own, so one instance can be
    shared by any number of concurrent flow calls.
    """

    def __init__(self, llm: "LLMProvider", model_name: str, user_id: str | None = None):
        """Initialize the context.

        Args:
            llm: Provider used for the single external call of a flow
            model_name: Model identifier passed to the provider
            user_id: Optional identity of the authenticated caller

        Raises:
            ValueError: If model_name is empty
        """
        if not model_name:
            raise ValueError("FlowContext requires a non-empty model_name")
        self._llm = llm
        self._model_name = model_name
        self._user_id = user_id

    @property
    def llm(self) -> "LLMProvider":
        return self._llm

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def user_id(self) -> str | None:
        return self._user_id

    def __repr__(self) -> str:
        return (
            f"FlowContext(llm={getattr(self._llm, 'name', type(self._llm).__name__)!r}, "
            f"model_name={self._model_name!r}, user_id={self._user_id!r})"
        )
