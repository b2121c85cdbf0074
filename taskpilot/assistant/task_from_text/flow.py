"""Flow that turns a natural-language command into a structured task."""

from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow

from .models import CreateTaskFromTextInput, CreateTaskFromTextOutput
from .prompts import CreateTaskFromTextPrompt

CREATE_TASK_FROM_TEXT_FLOW = "createTaskFromTextFlow"


@flow(name=CREATE_TASK_FROM_TEXT_FLOW, description="Parse a natural language command into a task")
class CreateTaskFromTextFlow(Flow[CreateTaskFromTextInput, CreateTaskFromTextOutput]):
    input_model = CreateTaskFromTextInput
    output_model = CreateTaskFromTextOutput
    prompt_name = CreateTaskFromTextPrompt.__resource_name__

    def prompt_variables(self, input_data: CreateTaskFromTextInput) -> dict[str, str]:
        return {
            "current_date": input_data.context.current_date,
            "command": input_data.command,
        }
