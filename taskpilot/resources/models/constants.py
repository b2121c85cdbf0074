"""Resource type constants."""

from enum import Enum


class ResourceType(str, Enum):
    """Kinds of resources kept in the resource registry."""

    PROMPT_CONFIG = "prompt_config"
