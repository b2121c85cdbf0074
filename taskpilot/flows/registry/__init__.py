from .registry import FlowRegistry, flow_registry

__all__ = ["FlowRegistry", "flow_registry"]
