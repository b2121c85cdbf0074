from .decorators import flow

__all__ = ["flow"]
