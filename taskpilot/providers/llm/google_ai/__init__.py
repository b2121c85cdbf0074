from .provider import GoogleAIProvider, GoogleAISettings

__all__ = ["GoogleAIProvider", "GoogleAISettings"]
