"""Prompt resources and the resource registry."""

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import PromptResource, ResourceBase
from taskpilot.resources.models.constants import ResourceType
from taskpilot.resources.registry.registry import ResourceRegistry, resource_registry

__all__ = [
    "PromptResource",
    "ResourceBase",
    "ResourceRegistry",
    "ResourceType",
    "prompt",
    "resource_registry",
]
