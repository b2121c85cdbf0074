"""Tests for the assistant input and output contracts."""

import pytest
from pydantic import ValidationError

from taskpilot.assistant import (
    CreateTaskFromTextInput,
    CreateTaskFromTextOutput,
    Priority,
    SuggestTaskDistributionOutput,
    SuggestTaskOrderOutput,
    Task,
)
from taskpilot.assistant.task_order import SuggestTaskOrderFlow
from taskpilot.core.errors import InputValidationError


class TestTaskContract:
    def test_snake_and_camel_case_names(self):
        task = Task(id="A", title="t", priority=Priority.LOW, due_date="2024-01-01")
        assert task.to_wire() == {"id": "A", "title": "t", "priority": "Low", "dueDate": "2024-01-01"}

    def test_priority_value_string(self):
        assert Task(id="A", title="t", priority="Critical").priority is Priority.CRITICAL

    def test_priority_closed_set(self):
        with pytest.raises(ValidationError):
            Task(id="A", title="t", priority="Urgent")

    def test_due_date_must_be_iso(self):
        with pytest.raises(ValidationError):
            Task(id="A", title="t", priority="Low", due_date="next tuesday")

    def test_frozen(self):
        task = Task(id="A", title="t", priority="Low")
        with pytest.raises(ValidationError):
            task.title = "changed"


class TestInputValidationThroughFlow:
    @pytest.fixture
    def order_flow(self):
        return SuggestTaskOrderFlow()

    def test_accepts_camel_case_mapping(self, order_flow):
        validated = order_flow.validate_input(
            {"tasks": [{"id": "A", "title": "t", "priority": "High", "estimatedDuration": 30, "tags": ["x"]}]}
        )
        assert validated.tasks[0].estimated_duration == 30.0
        assert validated.tasks[0].priority is Priority.HIGH

    @pytest.mark.parametrize(
        "task",
        [
            {"title": "no id", "priority": "High"},
            {"id": "A", "title": "t", "priority": "High", "estimatedDuration": "30"},
            {"id": "A", "title": 5, "priority": "High"},
            {"id": "A", "title": "t", "priority": "Urgent"},
            {"id": "A", "title": "t", "priority": "High", "colour": "red"},
            {"id": "A", "title": "t", "priority": "High", "dueDate": "tomorrow"},
        ],
    )
    def test_rejects_malformed_tasks(self, order_flow, task):
        with pytest.raises(InputValidationError):
            order_flow.validate_input({"tasks": [task]})

    def test_create_task_context_date_must_be_iso(self):
        with pytest.raises(ValidationError):
            CreateTaskFromTextInput.model_validate_json(
                '{"command": "call John", "context": {"currentDate": "someday"}}'
            )


class TestOutputContracts:
    def test_order_output_ignores_unknown_keys(self):
        output = SuggestTaskOrderOutput.model_validate({"orderedTasks": ["B", "A"], "reasoning": "r", "extra": 1})
        assert output.ordered_tasks == ["B", "A"]

    def test_order_output_requires_reasoning(self):
        with pytest.raises(ValidationError):
            SuggestTaskOrderOutput.model_validate({"orderedTasks": ["A"]})

    def test_create_task_output_optional_fields(self):
        output = CreateTaskFromTextOutput.model_validate({"title": "Call John"})
        assert output.due_date is None
        assert output.priority is None

    def test_create_task_output_keeps_model_due_date_as_given(self):
        output = CreateTaskFromTextOutput.model_validate({"title": "Call John", "dueDate": "next Tuesday"})
        assert output.due_date == "next Tuesday"

    def test_create_task_output_rejects_unknown_priority(self):
        with pytest.raises(ValidationError):
            CreateTaskFromTextOutput.model_validate({"title": "Call John", "priority": "Urgent"})

    def test_distribution_output_is_a_list(self):
        output = SuggestTaskDistributionOutput.model_validate(
            [{"taskId": "t1", "teamMemberId": "m1", "reason": "skills match"}]
        )
        assert len(output) == 1
        assert output[0].team_member_id == "m1"
        assert [a.task_id for a in output] == ["t1"]
        assert output.to_wire() == [{"taskId": "t1", "teamMemberId": "m1", "reason": "skills match"}]

    def test_distribution_output_rejects_object(self):
        with pytest.raises(ValidationError):
            SuggestTaskDistributionOutput.model_validate({"taskId": "t1"})
