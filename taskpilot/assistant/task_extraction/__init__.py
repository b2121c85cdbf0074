from .flow import EXTRACT_TASKS_FROM_NOTES_FLOW, ExtractTasksFromNotesFlow
from .models import ExtractTasksFromNotesInput, ExtractTasksFromNotesOutput

__all__ = [
    "EXTRACT_TASKS_FROM_NOTES_FLOW",
    "ExtractTasksFromNotesFlow",
    "ExtractTasksFromNotesInput",
    "ExtractTasksFromNotesOutput",
]
