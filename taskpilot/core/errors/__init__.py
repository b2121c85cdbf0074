"""Error taxonomy for the flow layer."""

from .errors import (
    BaseError,
    ConfigurationError,
    EmptyResponseError,
    ErrorContext,
    ExecutionError,
    InputValidationError,
    MalformedResponseError,
    ProviderError,
    SchemaMismatchError,
    ValidationError,
)
from .models import (
    ConfigurationErrorContext,
    ErrorContextData,
    ProviderErrorContext,
    ValidationErrorDetail,
)

__all__ = [
    "BaseError",
    "ConfigurationError",
    "EmptyResponseError",
    "ErrorContext",
    "ExecutionError",
    "InputValidationError",
    "MalformedResponseError",
    "ProviderError",
    "SchemaMismatchError",
    "ValidationError",
    "ConfigurationErrorContext",
    "ErrorContextData",
    "ProviderErrorContext",
    "ValidationErrorDetail",
]
