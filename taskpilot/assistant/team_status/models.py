"""Models for the team status summary flow."""

from pydantic import Field

from taskpilot.core.models import ResponseModel, StrictBaseModel


class GenerateTeamStatusSummaryInput(StrictBaseModel):
    project_id: str = Field(..., min_length=1, description="The ID of the team project.")


class GenerateTeamStatusSummaryOutput(ResponseModel):
    summary: str = Field(..., description="A summary of the team project status.")
