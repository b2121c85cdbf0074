"""Prompts for creating a task from text."""

from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("createTaskFromTextPrompt")
class CreateTaskFromTextPrompt(ResourceBase):
    """Prompt for parsing a spoken or typed command into a task draft."""

    template: ClassVar[str] = """You are an AI assistant that creates tasks from natural language.
The current date is: {{current_date}}
Parse the following command and extract the task details.
- The 'title' should be a concise action item.
- The 'dueDate' should be in ISO 8601 format. If a time is mentioned without a date, assume it's for today. If no date or time is mentioned, use today's date.
- The 'priority' should be one of 'Low', 'Medium', 'High', 'Critical'. Default to 'Medium' if not specified.

Command: "{{command}}"

Return a JSON object with the extracted details."""
