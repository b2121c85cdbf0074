"""Deterministic text rendering for flow instructions.

Templates use ``{{variable}}`` placeholders. Flows build a flat mapping of
variable name to value; list fields are turned into text with
``render_each`` (one block per element) or ``join_values`` (inline list)
before substitution. Absent values render as an empty string.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def format_value(value: Any) -> str:
    """Render a scalar as instruction text.

    None renders as an empty string, enums as their value, booleans as
    ``true``/``false`` and integral floats without a trailing ``.0``.
    Lists and tuples are joined with ``join_values``.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return join_values(value)
    return str(value)


def join_values(values: Iterable[Any], separator: str = ", ") -> str:
    """Join values inline; the separator never follows the last element."""
    return separator.join(format_value(v) for v in values)


def render_each(items: Iterable[T], render_item: Callable[[T], str], separator: str = "\n") -> str:
    """Render one block per element, separated but without a trailing separator."""
    return separator.join(render_item(item) for item in items)


def placeholders(template: str) -> set[str]:
    """Names of all placeholders in a template."""
    return set(PLACEHOLDER_PATTERN.findall(template))


def render_template(template: str, variables: Mapping[str, Any]) -> str:
    """Substitute every ``{{name}}`` placeholder in a single pass.

    Values go through ``format_value``. Substituted text is not scanned
    again, so user content that happens to contain braces is kept as is.

    Raises:
        ValueError: If a placeholder has no variable or a variable has no placeholder
    """
    names = placeholders(template)
    missing = sorted(names - set(variables))
    if missing:
        raise ValueError(
            f"Template has unreplaced placeholders: {missing}. "
            f"All template variables must be provided."
        )
    unused = sorted(set(variables) - names)
    if unused:
        raise ValueError(f"Variables not used by template: {unused}")
    return PLACEHOLDER_PATTERN.sub(lambda match: format_value(variables[match.group(1)]), template)
