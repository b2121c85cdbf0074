from .schema import model_to_response_schema

__all__ = ["model_to_response_schema"]
