from .context import FlowContext

__all__ = ["FlowContext"]
