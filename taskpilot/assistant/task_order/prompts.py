"""Prompts for the task ordering flow."""

from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("suggestTaskOrderPrompt")
class SuggestTaskOrderPrompt(ResourceBase):
    """Prompt for ordering tasks by urgency, deadlines and duration."""

    template: ClassVar[str] = """Given the following tasks, suggest an optimal order in which they should be performed to maximize productivity. Consider urgency, importance, deadlines, and estimated duration.

Tasks:
{{tasks}}

Respond with a JSON object containing an "orderedTasks" array of task IDs in the suggested order and a "reasoning" field explaining the rationale behind the order."""
