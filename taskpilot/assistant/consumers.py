"""Helpers for code that consumes flow results.

The ordering and distribution flows may return identifiers that are not
in the input (the model can invent them). These helpers map results back
onto the caller's objects and silently drop anything unmatched; the
number dropped is logged at debug level.
"""

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Sequence
from datetime import date, datetime, timezone
from typing import TypeVar

from .models import (
    DistributionTask,
    Priority,
    Task,
    TaskDraft,
    TaskStatus,
    TeamMember,
    parse_iso_datetime,
)
from .task_distribution.models import SuggestTaskDistributionOutput, TaskAssignment
from .task_from_text.models import CommandContext, CreateTaskFromTextOutput
from .task_order.models import SuggestTaskOrderOutput

logger = logging.getLogger(__name__)

T = TypeVar("T")

TODAYS_TASK_LIMIT = 5


def order_tasks(tasks: Sequence[Task], output: SuggestTaskOrderOutput) -> list[Task]:
    """Reorder ``tasks`` as returned by the ordering flow.

    Unknown identifiers are dropped. A repeated identifier keeps only its
    first position, so each task appears at most once. The returned order is
    kept otherwise.
    Tasks the model did not mention are not appended.
    """
    by_id = {task.id: task for task in tasks}
    seen: set[str] = set()
    ordered = []
    for task_id in output.ordered_tasks:
        if task_id in by_id and task_id not in seen:
            seen.add(task_id)
            ordered.append(by_id[task_id])
    dropped = len(output.ordered_tasks) - len(ordered)
    if dropped:
        logger.debug(f"Dropped {dropped} unknown or repeated task id(s) from suggested order")
    return ordered


def match_assignments(
    tasks: Iterable[DistributionTask],
    members: Iterable[TeamMember],
    output: SuggestTaskDistributionOutput,
) -> list[TaskAssignment]:
    """Keep only assignments whose task and team member both exist in the input."""
    task_ids = {task.id for task in tasks}
    member_ids = {member.id for member in members}
    matched = [a for a in output if a.task_id in task_ids and a.team_member_id in member_ids]
    dropped = len(output) - len(matched)
    if dropped:
        logger.debug(f"Dropped {dropped} assignment(s) referring to unknown tasks or team members")
    return matched


def draft_task_from_text(output: CreateTaskFromTextOutput, context: CommandContext) -> TaskDraft:
    """Fill the defaults callers apply to a createTaskFromText answer.

    A missing due date becomes the command's current date and a missing
    priority becomes Medium.
    """
    return TaskDraft(
        title=output.title,
        due_date=output.due_date or context.current_date,
        priority=output.priority or Priority.MEDIUM,
    )


def todays_tasks(tasks: Iterable[Task], today: date | datetime, limit: int = TODAYS_TASK_LIMIT) -> list[Task]:
    """First ``limit`` tasks due on the calendar day ``today``, in input order."""
    if isinstance(today, datetime):
        today = today.date()
    due_today = [task for task in tasks if task.due_date and parse_iso_datetime(task.due_date).date() == today]
    return due_today[:limit]


def overdue_tasks(tasks: Iterable[Task], now: datetime) -> list[Task]:
    """Tasks due before ``now`` that are not done. A naive ``now`` is taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return [
        task
        for task in tasks
        if task.due_date and task.status != TaskStatus.DONE and parse_iso_datetime(task.due_date) < now
    ]


async def call_with_timeout(awaitable: Awaitable[T], seconds: float) -> T:
    """Race a flow call against a timer.

    The flow layer has no cancellation of its own; on timeout the pending
    call is cancelled by ``asyncio.wait_for``.

    Raises:
        TimeoutError: If the call does not settle within ``seconds``
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError:
        logger.warning(f"Flow call timed out after {seconds}s")
        raise
