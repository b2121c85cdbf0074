from .registry import ResourceRegistry, resource_registry

__all__ = ["ResourceRegistry", "resource_registry"]
