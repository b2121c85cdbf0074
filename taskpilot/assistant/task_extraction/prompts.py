from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("extractTasksFromNotesPrompt")
class ExtractTasksFromNotesPrompt(ResourceBase):
    """Prompt for pulling action items out of free-form notes."""

    template: ClassVar[str] = """You are a helpful assistant designed to extract tasks from notes.

Given the following notes, extract all tasks that need to be done. A task is an action item, usually with a verb.
Return the tasks as a JSON object with a "tasks" array of strings.

Notes: {{notes}}"""
