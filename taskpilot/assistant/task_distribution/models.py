"""Models for the task distribution flow."""

from collections.abc import Iterator

from pydantic import ConfigDict, Field, RootModel

from taskpilot.assistant.models import DistributionTask, TeamMember
from taskpilot.core.models import ResponseModel, StrictBaseModel


class SuggestTaskDistributionInput(StrictBaseModel):
    tasks: list[DistributionTask] = Field(..., description="The list of tasks to be distributed.")
    team_members: list[TeamMember] = Field(
        ..., description="The list of team members to distribute the tasks among."
    )


class TaskAssignment(ResponseModel):
    task_id: str = Field(..., description="The ID of the assigned task")
    team_member_id: str = Field(..., description="The ID of the team member assigned to the task")
    reason: str = Field(..., description="Explanation of why the task was assigned to this team member.")


class SuggestTaskDistributionOutput(RootModel[list[TaskAssignment]]):
    """The suggested task distribution among team members (a JSON array)."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[TaskAssignment]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> TaskAssignment:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    def to_wire(self) -> list[dict]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
