from .flow import SUMMARIZE_NOTES_FLOW, SummarizeNotesFlow
from .models import SummarizeNotesInput, SummarizeNotesOutput

__all__ = ["SUMMARIZE_NOTES_FLOW", "SummarizeNotesFlow", "SummarizeNotesInput", "SummarizeNotesOutput"]
