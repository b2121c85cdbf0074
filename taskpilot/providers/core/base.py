"""Provider base implementation with configuration and lifecycle management.

This module provides the foundation for all providers: pydantic settings
models, and a Provider base class with a guarded initialise/shutdown
lifecycle.
"""

import asyncio
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from taskpilot.core.errors.errors import ErrorContext, ProviderError
from taskpilot.core.errors.models import ProviderErrorContext

logger = logging.getLogger(__name__)


class ProviderSettings(BaseModel):
    """Base settings for providers.

    Contains only fields that apply to every provider type. API specific
    fields (api keys, generation parameters) live on subclasses.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, validate_assignment=True)

    timeout: float = Field(default=60.0, description="Operation timeout in seconds")
    verbose: bool = Field(default=False, description="Enable verbose logging for debugging")

    def with_overrides(self, **kwargs: Any) -> "ProviderSettings":
        """Create new settings with overrides.

        Args:
            **kwargs: Settings to override

        Returns:
            New settings instance with overrides
        """
        settings_dict = self.model_dump()
        settings_dict.update(kwargs)
        return self.__class__(**settings_dict)


T = TypeVar("T", bound=ProviderSettings)


class Provider(BaseModel, Generic[T]):
    """Base class for all providers.

    This class provides:
    1. Consistent initialization and cleanup pattern
    2. Configuration via settings models
    3. Clean error handling
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Provider name must not be empty")
    provider_type: str = Field(..., min_length=1, description="Provider type must not be empty")
    settings: T

    _initialized: bool = PrivateAttr(default=False)
    _setup_lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    @property
    def initialized(self) -> bool:
        """Check if provider is initialized."""
        return self._initialized

    async def initialize(self) -> None:
        """Initialize the provider once.

        Raises:
            ProviderError: If initialization fails
        """
        if self._initialized:
            return

        async with self._setup_lock:
            if self._initialized:
                return

            try:
                await self._initialize()
            except ProviderError:
                raise
            except Exception as e:
                logger.error(f"Failed to initialize provider '{self.name}': {str(e)}")
                raise ProviderError(
                    message=f"Failed to initialize provider: {str(e)}",
                    context=ErrorContext.create(
                        flow_name="provider_base",
                        error_type="InitializationError",
                        error_location="initialize",
                        component=self.name,
                        operation="provider_initialization",
                    ),
                    provider_context=ProviderErrorContext(
                        provider_name=self.name,
                        provider_type=self.provider_type,
                        operation="initialize",
                    ),
                    cause=e,
                ) from e
            self._initialized = True
            logger.info(f"Provider '{self.name}' initialized successfully")

    async def shutdown(self) -> None:
        """Release provider resources if it was initialized."""
        if not self._initialized:
            return
        await self._shutdown()
        self._initialized = False
        logger.info(f"Provider '{self.name}' shut down")

    async def _initialize(self) -> None:
        """Concrete initialization logic implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement _initialize().")

    async def _shutdown(self) -> None:
        """Concrete shutdown logic; nothing to release by default."""
