"""Models for the task ordering flow."""

from pydantic import Field

from taskpilot.assistant.models import Task
from taskpilot.core.models import ResponseModel, StrictBaseModel


class SuggestTaskOrderInput(StrictBaseModel):
    tasks: list[Task] = Field(..., description="An array of tasks to be ordered.")


class SuggestTaskOrderOutput(ResponseModel):
    ordered_tasks: list[str] = Field(
        ..., description="An array of task IDs representing the suggested order."
    )
    reasoning: str = Field(..., description="The AI reasoning for the suggested order.")
