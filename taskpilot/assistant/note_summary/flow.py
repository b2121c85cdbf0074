"""Note summary flow."""

from taskpilot.flows.base.base import Flow
from taskpilot.flows.decorators.decorators import flow

from .models import SummarizeNotesInput, SummarizeNotesOutput
from .prompts import SummarizeNotesPrompt

SUMMARIZE_NOTES_FLOW = "summarizeNotesFlow"


@flow(name=SUMMARIZE_NOTES_FLOW, description="Summarize a note into markdown bullet points")
class SummarizeNotesFlow(Flow[SummarizeNotesInput, SummarizeNotesOutput]):
    input_model = SummarizeNotesInput
    output_model = SummarizeNotesOutput
    prompt_name = SummarizeNotesPrompt.__resource_name__

    def prompt_variables(self, input_data: SummarizeNotesInput) -> dict[str, str]:
        return {"note_content": input_data.note_content}
