"""Models for creating a task from a natural-language command."""

from pydantic import Field, field_validator

from taskpilot.assistant.models import Priority, validate_iso_string
from taskpilot.core.models import ResponseModel, StrictBaseModel


class CommandContext(StrictBaseModel):
    """Anchor for resolving relative dates such as "today" or "tomorrow"."""

    current_date: str = Field(
        ...,
        description='The current date in ISO format to resolve relative dates like "today" or "tomorrow".',
    )

    @field_validator("current_date")
    @classmethod
    def validate_current_date(cls, v: str) -> str:
        return validate_iso_string(v)  # type: ignore[return-value]


class CreateTaskFromTextInput(StrictBaseModel):
    command: str = Field(..., min_length=1, description="The natural language command to create a task.")
    context: CommandContext


class CreateTaskFromTextOutput(ResponseModel):
    title: str = Field(..., description="The extracted title of the task. Should be a concise action.")
    due_date: str | None = Field(
        default=None,
        description="The extracted due date for the task in ISO 8601 format. "
        "If no date is specified, use the current date.",
    )
    priority: Priority | None = Field(
        default=None, description='The priority of the task. Default to "Medium" if not specified.'
    )
