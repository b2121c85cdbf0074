"""Team status summary flow."""

from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow

from .models import GenerateTeamStatusSummaryInput, GenerateTeamStatusSummaryOutput
from .prompts import GenerateTeamStatusSummaryPrompt

GENERATE_TEAM_STATUS_SUMMARY_FLOW = "generateTeamStatusSummaryFlow"


@flow(
    name=GENERATE_TEAM_STATUS_SUMMARY_FLOW,
    description="Generate a status summary for a team project: completed and pending tasks and assignments",
)
class GenerateTeamStatusSummaryFlow(Flow[GenerateTeamStatusSummaryInput, GenerateTeamStatusSummaryOutput]):
    input_model = GenerateTeamStatusSummaryInput
    output_model = GenerateTeamStatusSummaryOutput
    prompt_name = GenerateTeamStatusSummaryPrompt.__resource_name__

    def prompt_variables(self, input_data: GenerateTeamStatusSummaryInput) -> dict[str, str]:
        return {"project_id": input_data.project_id}
