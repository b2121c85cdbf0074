"""Public entry points, one per flow.

Each function forwards its argument and the caller's FlowContext to the
registered flow and returns the validated output. Failures propagate to
the caller unchanged; use ``Flow.execute`` through ``flow_registry`` for
a tagged result instead.
"""

from collections.abc import Mapping
from typing import Any

from taskpilot.core.context.context import FlowContext
from taskpilot.flows.registry.registry import flow_registry

from .note_summary import SUMMARIZE_NOTES_FLOW, SummarizeNotesInput, SummarizeNotesOutput
from .task_distribution import (
    SUGGEST_TASK_DISTRIBUTION_FLOW,
    SuggestTaskDistributionInput,
    SuggestTaskDistributionOutput,
)
from .task_extraction import EXTRACT_TASKS_FROM_NOTES_FLOW, ExtractTasksFromNotesInput, ExtractTasksFromNotesOutput
from .task_from_text import CREATE_TASK_FROM_TEXT_FLOW, CreateTaskFromTextInput, CreateTaskFromTextOutput
from .task_order import SUGGEST_TASK_ORDER_FLOW, SuggestTaskOrderInput, SuggestTaskOrderOutput
from .team_status import (
    GENERATE_TEAM_STATUS_SUMMARY_FLOW,
    GenerateTeamStatusSummaryInput,
    GenerateTeamStatusSummaryOutput,
)


async def suggest_task_order(
    input_data: SuggestTaskOrderInput | Mapping[str, Any], context: FlowContext
) -> SuggestTaskOrderOutput:
    return await flow_registry.get(SUGGEST_TASK_ORDER_FLOW).run(input_data, context)


async def suggest_task_distribution(
    input_data: SuggestTaskDistributionInput | Mapping[str, Any], context: FlowContext
) -> SuggestTaskDistributionOutput:
    return await flow_registry.get(SUGGEST_TASK_DISTRIBUTION_FLOW).run(input_data, context)


async def summarize_notes(
    input_data: SummarizeNotesInput | Mapping[str, Any], context: FlowContext
) -> SummarizeNotesOutput:
    return await flow_registry.get(SUMMARIZE_NOTES_FLOW).run(input_data, context)


async def extract_tasks_from_notes(
    input_data: ExtractTasksFromNotesInput | Mapping[str, Any], context: FlowContext
) -> ExtractTasksFromNotesOutput:
    return await flow_registry.get(EXTRACT_TASKS_FROM_NOTES_FLOW).run(input_data, context)


async def generate_team_status_summary(
    input_data: GenerateTeamStatusSummaryInput | Mapping[str, Any], context: FlowContext
) -> GenerateTeamStatusSummaryOutput:
    return await flow_registry.get(GENERATE_TEAM_STATUS_SUMMARY_FLOW).run(input_data, context)


async def create_task_from_text(
    input_data: CreateTaskFromTextInput | Mapping[str, Any], context: FlowContext
) -> CreateTaskFromTextOutput:
    return await flow_registry.get(CREATE_TASK_FROM_TEXT_FLOW).run(input_data, context)
