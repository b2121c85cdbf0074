"""Resource registry for prompt resources.

Resources are stored by (resource_type, name); lookups go by name only.
"""

import logging
from typing import Any

from taskpilot.core.registry.registry import BaseRegistry
from taskpilot.resources.models.base import ResourceBase
from taskpilot.resources.models.constants import ResourceType

logger = logging.getLogger(__name__)


class ResourceRegistry(BaseRegistry[ResourceBase]):
    """Registry for non-provider resources such as prompts."""

    def __init__(self) -> None:
        self._resources: dict[tuple[str, str], ResourceBase] = {}
        self._metadata: dict[tuple[str, str], dict[str, Any]] = {}

    def register(
        self, name: str, obj: ResourceBase, resource_type: str = ResourceType.PROMPT_CONFIG, **metadata: Any
    ) -> None:
        """Register a resource.

        Raises:
            TypeError: If the resource is not a ResourceBase instance
            ValueError: If a resource with the same name and type already exists
        """
        if not isinstance(obj, ResourceBase):
            raise TypeError(f"Resource '{name}' must be a ResourceBase instance, got {type(obj)}")
        key = (ResourceType(resource_type).value, name)
        if key in self._resources:
            raise ValueError(f"Resource '{name}' of type '{key[0]}' already exists")
        self._resources[key] = obj
        self._metadata[key] = metadata
        logger.debug(f"Registered {key[0]} '{name}'")

    def get(self, name: str, expected_type: type | None = None) -> ResourceBase:
        """Get a resource by name.

        Raises:
            KeyError: If the resource doesn't exist
            TypeError: If the resource doesn't match the expected type
        """
        for (_, resource_name), resource in self._resources.items():
            if resource_name == name:
                if expected_type and not isinstance(resource, expected_type):
                    raise TypeError(
                        f"Resource '{name}' has type {type(resource).__name__}, "
                        f"expected {expected_type.__name__}"
                    )
                return resource
        raise KeyError(f"Resource '{name}' not found")

    def get_metadata(self, name: str) -> dict[str, Any]:
        for key in self._resources:
            if key[1] == name:
                return self._metadata[key]
        raise KeyError(f"Resource '{name}' not found")

    def contains(self, name: str) -> bool:
        return any(resource_name == name for _, resource_name in self._resources)

    def list(self, filter_criteria: dict[str, Any] | None = None) -> list[str]:
        """List resource names, optionally filtered by resource_type."""
        filter_type = (filter_criteria or {}).get("resource_type")
        if filter_type is not None:
            filter_type = ResourceType(filter_type).value
        return [name for rt, name in self._resources if filter_type is None or rt == filter_type]

    def clear(self) -> None:
        self._resources.clear()
        self._metadata.clear()
        logger.debug("Cleared resource registry")


resource_registry = ResourceRegistry()
