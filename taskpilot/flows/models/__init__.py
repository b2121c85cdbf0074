from .results import FlowErrorKind, FlowResult, FlowStatus

__all__ = ["FlowErrorKind", "FlowResult", "FlowStatus"]
