"""Assistant flows for tasks, notes and teams.

Importing this package registers the six flows and their prompts.
"""

from .consumers import (
    call_with_timeout,
    draft_task_from_text,
    match_assignments,
    order_tasks,
    overdue_tasks,
    todays_tasks,
)
from .context import create_flow_context
from .facade import (
    create_task_from_text,
    extract_tasks_from_notes,
    generate_team_status_summary,
    suggest_task_distribution,
    suggest_task_order,
    summarize_notes,
)
from .models import DistributionTask, Priority, Task, TaskDraft, TaskStatus, TeamMember
from .note_summary import SummarizeNotesInput, SummarizeNotesOutput
from .task_distribution import SuggestTaskDistributionInput, SuggestTaskDistributionOutput, TaskAssignment
from .task_extraction import ExtractTasksFromNotesInput, ExtractTasksFromNotesOutput
from .task_from_text import CommandContext, CreateTaskFromTextInput, CreateTaskFromTextOutput
from .task_order import SuggestTaskOrderInput, SuggestTaskOrderOutput
from .team_status import GenerateTeamStatusSummaryInput, GenerateTeamStatusSummaryOutput

__all__ = [
    "CommandContext",
    "CreateTaskFromTextInput",
    "CreateTaskFromTextOutput",
    "DistributionTask",
    "ExtractTasksFromNotesInput",
    "ExtractTasksFromNotesOutput",
    "GenerateTeamStatusSummaryInput",
    "GenerateTeamStatusSummaryOutput",
    "Priority",
    "SuggestTaskDistributionInput",
    "SuggestTaskDistributionOutput",
    "SuggestTaskOrderInput",
    "SuggestTaskOrderOutput",
    "SummarizeNotesInput",
    "SummarizeNotesOutput",
    "Task",
    "TaskAssignment",
    "TaskDraft",
    "TaskStatus",
    "TeamMember",
    "call_with_timeout",
    "create_flow_context",
    "create_task_from_text",
    "draft_task_from_text",
    "extract_tasks_from_notes",
    "generate_team_status_summary",
    "match_assignments",
    "order_tasks",
    "overdue_tasks",
    "suggest_task_distribution",
    "suggest_task_order",
    "summarize_notes",
    "todays_tasks",
]
