from .flow import SUGGEST_TASK_DISTRIBUTION_FLOW, SuggestTaskDistributionFlow
from .models import SuggestTaskDistributionInput, SuggestTaskDistributionOutput, TaskAssignment

__all__ = [
    "SUGGEST_TASK_DISTRIBUTION_FLOW",
    "SuggestTaskDistributionFlow",
    "SuggestTaskDistributionInput",
    "SuggestTaskDistributionOutput",
    "TaskAssignment",
]
