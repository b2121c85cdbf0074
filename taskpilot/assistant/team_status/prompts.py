from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("generateTeamStatusSummaryPrompt")
class GenerateTeamStatusSummaryPrompt(ResourceBase):
    template: ClassVar[str] = """You are an AI assistant helping to manage team projects. Generate a concise status summary for project with ID {{project_id}}. The summary should include:

*   Completed tasks
*   Pending tasks
*   Task assignments to team members.

Keep the summary brief and informative."""
