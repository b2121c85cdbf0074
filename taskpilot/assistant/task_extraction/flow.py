"""Task extraction flow."""

from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow

from .models import ExtractTasksFromNotesInput, ExtractTasksFromNotesOutput
from .prompts import ExtractTasksFromNotesPrompt

EXTRACT_TASKS_FROM_NOTES_FLOW = "extractTasksFromNotesFlow"


@flow(name=EXTRACT_TASKS_FROM_NOTES_FLOW, description="Extract action items from notes as to-do strings")
class ExtractTasksFromNotesFlow(Flow[ExtractTasksFromNotesInput, ExtractTasksFromNotesOutput]):
    input_model = ExtractTasksFromNotesInput
    output_model = ExtractTasksFromNotesOutput
    prompt_name = ExtractTasksFromNotesPrompt.__resource_name__

    def prompt_variables(self, input_data: ExtractTasksFromNotesInput) -> dict[str, str]:
        return {"notes": input_data.notes}
