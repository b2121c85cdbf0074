"""Models for the note summary flow."""

from pydantic import Field

from taskpilot.core.models import ResponseModel, StrictBaseModel


class SummarizeNotesInput(StrictBaseModel):
    note_content: str = Field(..., description="The content of the note to be summarized.")


class SummarizeNotesOutput(ResponseModel):
    summary: str = Field(
        ..., description="The summarized content of the note, formatted as markdown bullet points."
    )
