from .flow import CREATE_TASK_FROM_TEXT_FLOW, CreateTaskFromTextFlow
from .models import CommandContext, CreateTaskFromTextInput, CreateTaskFromTextOutput

__all__ = [
    "CREATE_TASK_FROM_TEXT_FLOW",
    "CommandContext",
    "CreateTaskFromTextFlow",
    "CreateTaskFromTextInput",
    "CreateTaskFromTextOutput",
]
