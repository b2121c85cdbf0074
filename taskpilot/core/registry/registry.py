"""Base registry interface for the taskpilot registries.

Prompts, flows and provider factories are all kept in registries that
share this small interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class BaseRegistry(ABC, Generic[T]):
    """Abstract base class for all registry types."""

    @abstractmethod
    def register(self, name: str, obj: T, **metadata: Any) -> None:
        """Register an object with the registry.

        Args:
            name: Unique name for the object
            obj: The object to register
            **metadata: Additional metadata about the object
        """

    @abstractmethod
    def get(self, name: str, expected_type: type | None = None) -> T:
        """Get an object by name with optional type checking.

        Raises:
            KeyError: If the object doesn't exist
            TypeError: If the object doesn't match the expected type
        """

    @abstractmethod
    def contains(self, name: str) -> bool:
        """Check if an object exists in the registry."""

    @abstractmethod
    def list(self, filter_criteria: dict[str, Any] | None = None) -> list[str]:
        """List registered object names matching criteria."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all registrations from the registry."""
