"""Decorator for defining and registering flows."""

import logging
from collections.abc import Callable
from typing import TypeVar

from taskpilot.flows.base.base import Flow
from taskpilot.flows.registry.registry import flow_registry

C = TypeVar("C", bound=type[Flow])

logger = logging.getLogger(__name__)


def flow(*, name: str, description: str) -> Callable[[C], C]:
    """Mark a Flow subclass as a named flow and register an instance of it.

    Args:
        name: Registry name of the flow
        description: Description of the flow's purpose (required)

    Raises:
        ValueError: If description is empty or the class is missing
            input_model, output_model or prompt_name
        TypeError: If the class does not subclass Flow
    """
    if not description:
        raise ValueError(f"Flow '{name}' requires a description")

    def wrap(cls: C) -> C:
        if not isinstance(cls, type) or not issubclass(cls, Flow):
            raise TypeError(f"Flow '{name}' must subclass Flow, got {cls!r}")
        missing = [attr for attr in ("input_model", "output_model", "prompt_name") if not hasattr(cls, attr)]
        if missing:
            raise ValueError(f"Flow class '{name}' must define: {', '.join(missing)}")

        cls.name = name
        cls.description = description
        cls.__flow_metadata__ = {"name": name, "description": description}  # type: ignore[attr-defined]

        flow_registry.register(name, cls())
        logger.debug(f"Flow '{name}' defined by {cls.__name__}")
        return cls

    return wrap
