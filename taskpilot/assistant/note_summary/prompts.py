from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("summarizeNotesPrompt")
class SummarizeNotesPrompt(ResourceBase):
    template: ClassVar[str] = """Summarize the following note content into concise bullet points. Format the output as a markdown list.

Note Content:
{{note_content}}"""
