"""Prompts for the task distribution flow."""

from typing import ClassVar

from taskpilot.resources.decorators.decorators import prompt
from taskpilot.resources.models.base import ResourceBase


@prompt("suggestTaskDistributionPrompt")
class SuggestTaskDistributionPrompt(ResourceBase):
    """Prompt for assigning tasks to team members by workload and skills."""

    template: ClassVar[str] = """You are an AI project manager responsible for suggesting the distribution of tasks among team members.

Given the following tasks:

{{tasks}}

And the following team members:

{{team_members}}

Suggest an optimal task distribution, taking into account workload, skills, and task priorities. Provide a brief reason for each assignment.

Return the output as a JSON array of objects with taskId, teamMemberId, and reason fields."""
