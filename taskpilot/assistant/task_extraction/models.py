"""Models for the task extraction flow."""

from pydantic import Field

from taskpilot.core.models import ResponseModel, StrictBaseModel


class ExtractTasksFromNotesInput(StrictBaseModel):
    notes: str = Field(..., description="The notes from which to extract tasks.")


class ExtractTasksFromNotesOutput(ResponseModel):
    tasks: list[str] = Field(..., description="The extracted tasks from the notes.")
