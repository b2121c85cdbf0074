from .base import PromptResource, ResourceBase
from .constants import ResourceType

__all__ = ["PromptResource", "ResourceBase", "ResourceType"]
