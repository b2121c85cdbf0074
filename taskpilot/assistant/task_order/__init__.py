from .flow import SUGGEST_TASK_ORDER_FLOW, SuggestTaskOrderFlow
from .models import SuggestTaskOrderInput, SuggestTaskOrderOutput

__all__ = [
    "SUGGEST_TASK_ORDER_FLOW",
    "SuggestTaskOrderFlow",
    "SuggestTaskOrderInput",
    "SuggestTaskOrderOutput",
]
