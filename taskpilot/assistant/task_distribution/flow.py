"""Task distribution flow."""

from taskpilot.assistant.models import DistributionTask, TeamMember
from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow
from taskpilot.utils.formatting.prompt import format_value, join_values, render_each

from .models import SuggestTaskDistributionInput, SuggestTaskDistributionOutput
from .prompts import SuggestTaskDistributionPrompt

SUGGEST_TASK_DISTRIBUTION_FLOW = "suggestTaskDistributionFlow"


@flow(
    name=SUGGEST_TASK_DISTRIBUTION_FLOW,
    description="Suggest how to distribute tasks among team members based on workload and skills",
)
class SuggestTaskDistributionFlow(Flow[SuggestTaskDistributionInput, SuggestTaskDistributionOutput]):
    input_model = SuggestTaskDistributionInput
    output_model = SuggestTaskDistributionOutput
    prompt_name = SuggestTaskDistributionPrompt.__resource_name__

    def prompt_variables(self, input_data: SuggestTaskDistributionInput) -> dict[str, str]:
        return {
            "tasks": render_each(input_data.tasks, self._format_task),
            "team_members": render_each(input_data.team_members, self._format_member),
        }

    @staticmethod
    def _format_task(task: DistributionTask) -> str:
        return "\n".join(
            [
                f"Task ID: {format_value(task.id)}",
                f"Title: {format_value(task.title)}",
                f"Description: {format_value(task.description)}",
                f"Priority: {format_value(task.priority)}",
                f"Estimated Duration: {format_value(task.estimated_duration)} hours",
                f"Required Skills: {join_values(task.required_skills)}",
            ]
        )

    @staticmethod
    def _format_member(member: TeamMember) -> str:
        return "\n".join(
            [
                f"Team Member ID: {format_value(member.id)}",
                f"Name: {format_value(member.name)}",
                f"Available Hours Per Week: {format_value(member.available_hours_per_week)} hours",
                f"Skills: {join_values(member.skills)}",
                f"Current Workload: {format_value(member.current_workload)} hours",
            ]
        )
