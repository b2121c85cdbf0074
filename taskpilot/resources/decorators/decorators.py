from collections.abc import Callable
from typing import Any

from taskpilot.resources.models.base import PromptResource
from taskpilot.resources.models.constants import ResourceType
from taskpilot.resources.registry.registry import resource_registry


def prompt(name: str, **metadata: Any) -> Callable[[type], type]:
    """Register a class as a prompt resource.

    The decorated class must define a ``template`` string. The template is
    wrapped in a PromptResource and stored in the resource registry under
    ``name``; flows look it up with ``resource_registry.get(name)``.

    Raises:
        ValueError: If the decorated class has no string 'template' attribute
    """

    def decorator(cls: type) -> type:
        template = getattr(cls, "template", None)
        if not isinstance(template, str) or not template.strip():
            raise ValueError(f"Prompt '{name}' must have a 'template' attribute")

        cls.__resource_name__ = name  # type: ignore[attr-defined]
        cls.__resource_type__ = ResourceType.PROMPT_CONFIG  # type: ignore[attr-defined]
        cls.__resource_metadata__ = {"name": name, "type": ResourceType.PROMPT_CONFIG, **metadata}  # type: ignore[attr-defined]

        instance = PromptResource(name=name, template=template)
        resource_registry.register(name=name, obj=instance, resource_type=ResourceType.PROMPT_CONFIG, **metadata)
        return cls

    return decorator
