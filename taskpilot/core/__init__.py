"""Core foundational models and utilities."""

from .models import (
    ResponseModel,
    StrictBaseModel,
)

__all__ = [
    "StrictBaseModel",
    "ResponseModel",
]
