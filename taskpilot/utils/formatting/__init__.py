from .prompt import format_value, join_values, placeholders, render_each, render_template

__all__ = ["format_value", "join_values", "placeholders", "render_each", "render_template"]
