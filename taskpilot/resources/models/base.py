"""Base resource models."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from taskpilot.utils.formatting.prompt import placeholders, render_template

from .constants import ResourceType


class ResourceBase(BaseModel):
    """Base class for registered resources."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Unique resource name")
    type: ResourceType = Field(..., description="Resource type")


class PromptResource(ResourceBase):
    """An instruction template with ``{{variable}}`` placeholders."""

    type: ResourceType = ResourceType.PROMPT_CONFIG
    template: str = Field(..., min_length=1, description="Instruction template text")

    @property
    def variables(self) -> set[str]:
        """Placeholder names used by the template."""
        return placeholders(self.template)

    def render(self, variables: Mapping[str, Any]) -> str:
        """Render the template; every placeholder must be supplied and every variable used."""
        return render_template(self.template, variables)
