"""Tests for instruction rendering helpers."""

import pytest

from taskpilot.assistant.models import Priority
from taskpilot.utils.formatting.prompt import (
    format_value,
    join_values,
    placeholders,
    render_each,
    render_template,
)


class TestFormatValue:
    """Test scalar formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            ("plain text", "plain text"),
            (Priority.HIGH, "High"),
            (True, "true"),
            (False, "false"),
            (30.0, "30"),
            (1.5, "1.5"),
            (7, "7"),
            (["a", "b"], "a, b"),
        ],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected

    def test_none_never_renders_as_token(self):
        assert "None" not in format_value(None)
        assert "null" not in format_value(None)


class TestJoinAndEach:
    """Test list rendering."""

    def test_join_values_has_no_trailing_separator(self):
        assert join_values(["python", "sql", "react"]) == "python, sql, react"

    def test_join_values_single_and_empty(self):
        assert join_values(["python"]) == "python"
        assert join_values([]) == ""

    def test_render_each_separates_blocks(self):
        rendered = render_each([1, 2, 3], lambda n: f"item {n}", separator="\n--\n")
        assert rendered == "item 1\n--\nitem 2\n--\nitem 3"
        assert not rendered.endswith("--\n")

    def test_render_each_empty(self):
        assert render_each([], str) == ""


class TestRenderTemplate:
    """Test placeholder substitution."""

    def test_substitutes_all_placeholders(self):
        result = render_template("Hello {{name}}, due {{ due }}", {"name": "Ada", "due": None})
        assert result == "Hello Ada, due "

    def test_placeholders(self):
        assert placeholders("{{a}} and {{ b }} and {{a}}") == {"a", "b"}

    def test_missing_variable_raises(self):
        with pytest.raises(ValueError, match="unreplaced placeholders"):
            render_template("Hello {{name}}", {})

    def test_unused_variable_raises(self):
        with pytest.raises(ValueError, match="not used"):
            render_template("Hello {{name}}", {"name": "Ada", "extra": "x"})

    def test_substituted_text_is_not_expanded_again(self):
        result = render_template("Note: {{notes}}", {"notes": "literal {{notes}} braces"})
        assert result == "Note: literal {{notes}} braces"

    def test_rendering_is_deterministic(self):
        variables = {"a": "1", "b": ["x", "y"]}
        template = "{{a}} / {{b}}"
        assert render_template(template, variables) == render_template(template, variables)
