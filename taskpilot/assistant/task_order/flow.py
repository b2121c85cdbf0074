"""Task ordering flow."""

from taskpilot.assistant.models import Task
from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow
from taskpilot.utils.formatting.prompt import format_value, join_values, render_each

from .models import SuggestTaskOrderInput, SuggestTaskOrderOutput
from .prompts import SuggestTaskOrderPrompt

SUGGEST_TASK_ORDER_FLOW = "suggestTaskOrderFlow"


@flow(
    name=SUGGEST_TASK_ORDER_FLOW,
    description="Suggest the order tasks should be performed in, based on urgency, deadlines and duration",
)
class SuggestTaskOrderFlow(Flow[SuggestTaskOrderInput, SuggestTaskOrderOutput]):
    """Asks the model for an ordering of task IDs plus its reasoning."""

    input_model = SuggestTaskOrderInput
    output_model = SuggestTaskOrderOutput
    prompt_name = SuggestTaskOrderPrompt.__resource_name__

    def prompt_variables(self, input_data: SuggestTaskOrderInput) -> dict[str, str]:
        return {"tasks": render_each(input_data.tasks, self._format_task)}

    @staticmethod
    def _format_task(task: Task) -> str:
        return "\n".join(
            [
                f"- ID: {format_value(task.id)}",
                f"  Title: {format_value(task.title)}",
                f"  Description: {format_value(task.description)}",
                f"  Due Date: {format_value(task.due_date)}",
                f"  Priority: {format_value(task.priority)}",
                f"  Estimated Duration: {format_value(task.estimated_duration)} minutes",
                f"  Tags: {join_values(task.tags or [])}",
            ]
        )
