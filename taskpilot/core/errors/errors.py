"""Error classes with structured error context.

This module provides the error taxonomy of the flow layer:

1. Input validation failures, raised before any external call
2. Provider failures, raised by providers and propagated unchanged
3. Malformed responses, split into empty responses and schema mismatches
4. Configuration failures

Every error carries an ErrorContext so it can be logged and reported
uniformly.
"""

import logging
import traceback
from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .models import (
    ConfigurationErrorContext,
    ErrorContextData,
    ProviderErrorContext,
    ValidationErrorDetail,
)

logger = logging.getLogger(__name__)


class ErrorContext:
    """Structured error context.

    Wraps ErrorContextData and gives it a clean string form for logs.
    """

    def __init__(self, context_data: ErrorContextData):
        self._data = context_data

    @classmethod
    def create(
        cls, flow_name: str, error_type: str, error_location: str, component: str, operation: str
    ) -> "ErrorContext":
        """Create a new error context with required data.

        Args:
            flow_name: Name of the flow
            error_type: Type of error
            error_location: Location in code
            component: Component raising error
            operation: Operation being performed

        Returns:
            New ErrorContext instance
        """
        context_data = ErrorContextData(
            flow_name=flow_name,
            error_type=error_type,
            error_location=error_location,
            component=component,
            operation=operation,
        )
        return cls(context_data)

    @property
    def data(self) -> ErrorContextData:
        """Get the context data."""
        return self._data

    @property
    def timestamp(self) -> datetime:
        """Get the context creation timestamp."""
        return self._data.timestamp

    def __str__(self) -> str:
        return f"ErrorContext({self._data.model_dump()})"


class BaseError(Exception):
    """Base class for all taskpilot errors.

    Provides structured context, cause tracking and dictionary
    serialization for logging and reporting.
    """

    def __init__(self, message: str, context: ErrorContext, cause: Exception | None = None):
        """Initialize error.

        Args:
            message: Error message
            context: Required error context
            cause: Optional cause exception
        """
        self.message = message
        self.context = context
        self.cause = cause
        self.timestamp = datetime.now()
        self.traceback = self._capture_traceback()

        super().__init__(message)

    def _capture_traceback(self) -> str:
        """Capture the current traceback."""
        return traceback.format_exc()

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logs and FlowResult details."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.data.model_dump(mode="json"),
            "cause": str(self.cause) if self.cause else None,
            "traceback": self.traceback,
        }

    def __str__(self) -> str:
        cause_str = f" (caused by: {self.cause})" if self.cause else ""
        return f"{self.__class__.__name__}: {self.message}{cause_str}"


class ValidationError(BaseError):
    """Error raised when validation fails."""

    def __init__(
        self,
        message: str,
        validation_errors: list[ValidationErrorDetail],
        context: ErrorContext,
        cause: Exception | None = None,
    ):
        self.validation_errors = validation_errors
        super().__init__(message, context, cause)

    def __str__(self) -> str:
        base_str = super().__str__()
        if self.validation_errors:
            errors_str = "; ".join(f"{e.location}: {e.message}" for e in self.validation_errors[:3])
            if len(self.validation_errors) > 3:
                errors_str += f" (and {len(self.validation_errors) - 3} more)"
            return f"{base_str} - {errors_str}"
        return base_str


class InputValidationError(ValidationError):
    """Caller passed a malformed argument to a flow.

    Always raised before the external call is made.
    """


class ExecutionError(BaseError):
    """Error raised when flow execution fails."""


class MalformedResponseError(ExecutionError):
    """The external model answered, but not with a usable payload."""


class EmptyResponseError(MalformedResponseError):
    """The external call succeeded but returned no payload."""


class SchemaMismatchError(MalformedResponseError):
    """The returned payload does not satisfy the flow's output schema."""

    def __init__(
        self,
        message: str,
        validation_errors: list[ValidationErrorDetail],
        context: ErrorContext,
        cause: Exception | None = None,
    ):
        self.validation_errors = validation_errors
        super().__init__(message, context, cause)


class ProviderError(BaseError):
    """Error raised when a provider operation fails."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        provider_context: ProviderErrorContext,
        cause: Exception | None = None,
    ):
        self.provider_context = provider_context
        super().__init__(message, context, cause)


class ConfigurationError(BaseError):
    """Error raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        config_context: ConfigurationErrorContext,
        cause: Exception | None = None,
    ):
        self.config_context = config_context
        super().__init__(message, context, cause)


def validation_details(error: PydanticValidationError) -> list[ValidationErrorDetail]:
    """Convert a pydantic ValidationError into ValidationErrorDetail entries."""
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        details.append(
            ValidationErrorDetail(
                location=location,
                message=item["msg"],
                error_type=item["type"],
            )
        )
    return details


__all__ = [
    "ErrorContext",
    "BaseError",
    "ValidationError",
    "InputValidationError",
    "ExecutionError",
    "MalformedResponseError",
    "EmptyResponseError",
    "SchemaMismatchError",
    "ProviderError",
    "ConfigurationError",
    "validation_details",
]
