"""taskpilot: typed AI flows for tasks, notes and teams."""

from taskpilot.assistant import (
    create_flow_context,
    create_task_from_text,
    extract_tasks_from_notes,
    generate_team_status_summary,
    suggest_task_distribution,
    suggest_task_order,
    summarize_notes,
)
from taskpilot.core.context.context import FlowContext
from taskpilot.core.settings.settings import TaskpilotSettings, configure_logging, load_settings
from taskpilot.flows import FlowErrorKind, FlowResult, flow_registry

__version__ = "0.1.0"

__all__ = [
    "FlowContext",
    "FlowErrorKind",
    "FlowResult",
    "TaskpilotSettings",
    "configure_logging",
    "create_flow_context",
    "create_task_from_text",
    "extract_tasks_from_notes",
    "flow_registry",
    "generate_team_status_summary",
    "load_settings",
    "suggest_task_distribution",
    "suggest_task_order",
    "summarize_notes",
]
