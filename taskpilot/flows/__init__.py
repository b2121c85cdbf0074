"""Flow executor, decorator, registry and tagged results."""

from .base.base import Flow
from .decorators.decorators import flow
from .models.results import FlowErrorKind, FlowResult, FlowStatus
from .registry.registry import FlowRegistry, flow_registry

__all__ = [
    "Flow",
    "FlowErrorKind",
    "FlowRegistry",
    "FlowResult",
    "FlowStatus",
    "flow",
    "flow_registry",
]
