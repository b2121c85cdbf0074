"""Strict Pydantic models for error handling."""

from datetime import datetime

from pydantic import ConfigDict, Field

from taskpilot.core.models import StrictBaseModel


class ErrorModel(StrictBaseModel):
    """Error payloads keep their Python field names on the wire."""

    model_config = ConfigDict(alias_generator=None)


class ErrorContextData(ErrorModel):
    """Where and while doing what an error occurred."""

    flow_name: str = Field(..., description="Name of the flow where error occurred")
    error_type: str = Field(..., description="Type of error")
    error_location: str = Field(..., description="Location in code where error occurred")
    timestamp: datetime = Field(default_factory=datetime.now, description="When error occurred")
    component: str = Field(..., description="Component that raised the error")
    operation: str = Field(..., description="Operation being performed")


class ValidationErrorDetail(ErrorModel):
    """Single validation failure."""

    location: str = Field(..., description="Field or location of validation error")
    message: str = Field(..., description="Validation error message")
    error_type: str = Field(..., description="Type of validation error")


class ProviderErrorContext(ErrorModel):
    """Provider-side details of a failed external call."""

    provider_name: str = Field(..., description="Name of the provider")
    provider_type: str = Field(..., description="Type of provider")
    operation: str = Field(..., description="Operation that failed")


class ConfigurationErrorContext(ErrorModel):
    """Details of an invalid configuration value."""

    config_key: str = Field(..., description="Configuration key that failed")
    config_section: str = Field(..., description="Configuration section")
    expected_type: str = Field(..., description="Expected type of configuration")
    actual_value: str = Field(..., description="Actual value provided")
