from .base import Flow

__all__ = ["Flow"]
