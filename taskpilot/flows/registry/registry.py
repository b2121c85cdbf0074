"""Flow registry for tracking and accessing flows.

Flows defined with the @flow decorator register one instance here,
keyed by flow name.
"""

import builtins
import logging
from typing import Any

from taskpilot.core.registry.registry import BaseRegistry
from taskpilot.flows.base.base import Flow

logger = logging.getLogger(__name__)


class FlowRegistry(BaseRegistry[Flow]):
    """Registry of flow instances and their metadata."""

    def __init__(self) -> None:
        self._flow_instances: dict[str, Flow] = {}
        self._flow_metadata: dict[str, dict[str, Any]] = {}

    def register(self, name: str, obj: Flow, **metadata: Any) -> None:
        """Register a flow instance.

        Raises:
            TypeError: If obj is not a Flow instance
            ValueError: If a flow with the same name is already registered
        """
        if not isinstance(obj, Flow):
            raise TypeError(f"Flow '{name}' must be a Flow instance, got {type(obj).__name__}")
        if name in self._flow_instances:
            raise ValueError(f"Flow '{name}' already registered")
        self._flow_instances[name] = obj
        self._flow_metadata[name] = {
            "description": obj.description,
            "input_model": obj.input_model,
            "output_model": obj.output_model,
            "prompt_name": obj.prompt_name,
            **metadata,
        }
        logger.debug(f"Registered flow '{name}'")

    def get(self, name: str, expected_type: type | None = None) -> Flow:
        if name not in self._flow_instances:
            raise KeyError(f"Flow '{name}' not found")
        flow_instance = self._flow_instances[name]
        if expected_type and not isinstance(flow_instance, expected_type):
            raise TypeError(
                f"Flow '{name}' has type {type(flow_instance).__name__}, expected {expected_type.__name__}"
            )
        return flow_instance

    def contains(self, name: str) -> bool:
        return name in self._flow_instances

    def list(self, filter_criteria: dict[str, Any] | None = None) -> builtins.list[str]:
        """List flow names whose metadata matches every criterion."""
        criteria = filter_criteria or {}
        return [
            name
            for name, metadata in self._flow_metadata.items()
            if all(metadata.get(key) == value for key, value in criteria.items())
        ]

    def get_flow_metadata(self, name: str) -> dict[str, Any]:
        if name not in self._flow_metadata:
            raise KeyError(f"Flow '{name}' not found")
        return self._flow_metadata[name]

    def remove(self, name: str) -> bool:
        if name not in self._flow_instances:
            return False
        del self._flow_instances[name]
        del self._flow_metadata[name]
        return True

    def clear(self) -> None:
        self._flow_instances.clear()
        self._flow_metadata.clear()
        logger.debug("Cleared flow registry")


flow_registry = FlowRegistry()
