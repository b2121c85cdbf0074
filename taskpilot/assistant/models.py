"""Domain models shared by the assistant flows."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import Field, field_validator

from taskpilot.core.models import ResponseModel, StrictBaseModel


class Priority(str, Enum):
    """Task priority. Closed set; no other value is valid."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_iso_string(value: str | None) -> str | None:
    """Field validator body: the string must parse as ISO 8601."""
    if value is None:
        return None
    try:
        parse_iso_datetime(value)
    except ValueError as e:
        raise ValueError(f"'{value}' is not an ISO 8601 date") from e
    return value


class Task(StrictBaseModel):
    """A task as sent to the ordering flow."""

    id: str = Field(..., min_length=1, description="The unique identifier of the task.")
    title: str = Field(..., description="The title of the task.")
    description: str | None = Field(default=None, description="A description of the task.")
    due_date: str | None = Field(default=None, description="The due date of the task in ISO format.")
    priority: Priority = Field(..., strict=False, description="The priority of the task.")
    estimated_duration: float | None = Field(
        default=None, ge=0, description="The estimated duration of the task in minutes."
    )
    tags: list[str] | None = Field(default=None, description="Tags or categories for the task.")
    status: TaskStatus | None = Field(
        default=None, strict=False, description="Workflow status; used by callers, not sent to the model."
    )

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        return validate_iso_string(v)


class DistributionTask(StrictBaseModel):
    """A task as sent to the distribution flow."""

    id: str = Field(..., min_length=1, description="The unique identifier of the task.")
    title: str = Field(..., description="The title of the task.")
    description: str = Field(..., description="A detailed description of the task.")
    priority: Priority = Field(..., strict=False, description="The priority of the task.")
    estimated_duration: float = Field(..., ge=0, description="The estimated duration of the task in hours.")
    required_skills: list[str] = Field(..., description="List of skills required for the task.")


class TeamMember(StrictBaseModel):
    """A team member the distribution flow may assign tasks to."""

    id: str = Field(..., min_length=1, description="The unique identifier of the team member.")
    name: str = Field(..., description="The name of the team member.")
    available_hours_per_week: float = Field(
        ..., ge=0, description="The number of hours per week the team member is available."
    )
    skills: list[str] = Field(..., description="List of skills the team member possesses.")
    current_workload: float = Field(..., ge=0, description="The team member current workload in hours.")


class TaskDraft(ResponseModel):
    """A task ready to be persisted, built from a createTaskFromText answer."""

    title: str = Field(..., description="Concise action item")
    due_date: str = Field(..., description="Due date in ISO 8601 format")
    priority: Priority = Field(..., description="Task priority")


__all__ = [
    "DistributionTask",
    "Priority",
    "Task",
    "TaskDraft",
    "TaskStatus",
    "TeamMember",
    "parse_iso_datetime",
    "validate_iso_string",
]
