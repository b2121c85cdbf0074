from .decorators import prompt

__all__ = ["prompt"]
