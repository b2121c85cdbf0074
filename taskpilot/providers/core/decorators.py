from collections.abc import Callable
from typing import Any

from .base import Provider
from .registry import provider_registry


def provider(
    name: str, provider_type: str = "llm", *, settings_class: type | None = None, **metadata: Any
) -> Callable[[type], type]:
    """Register a class as a provider factory.

    Only Provider subclasses can be registered, and a settings_class is
    required so runtime settings dictionaries can be validated.
    """
    if settings_class is None:
        raise TypeError(f"Provider '{name}' must supply a 'settings_class' argument (Pydantic v2 class)")

    def decorator(cls: type) -> type:
        if not isinstance(cls, type) or not issubclass(cls, Provider):
            raise TypeError(f"Provider '{name}' must be a Provider subclass, got {type(cls)}")

        def factory(runtime_settings: dict[str, Any] | None = None) -> Any:
            try:
                settings = settings_class(**(runtime_settings or {}))
            except Exception as e:
                raise ValueError(
                    f"Error parsing settings for '{name}' with {settings_class.__name__}: {e}"
                ) from e
            return cls(name=name, provider_type=provider_type, settings=settings)

        provider_registry.register_factory(
            name=name, factory=factory, provider_type=provider_type, settings_class=settings_class, **metadata
        )
        cls.__provider_name__ = name  # type: ignore[attr-defined]
        cls.__provider_type__ = provider_type  # type: ignore[attr-defined]
        cls.settings_class = settings_class  # type: ignore[attr-defined]
        return cls

    return decorator


def llm_provider(name: str, **metadata: Any) -> Callable[[type], type]:
    """Register a class as an LLM provider factory."""
    return provider(name, "llm", **metadata)
