"""JSON schema helpers for structured model output."""

import copy
from typing import Any

from pydantic import BaseModel

# Keys the structured-output schema format does not accept.
_STRIPPED_KEYS = {"title", "default", "additionalProperties", "examples"}


def model_to_response_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Build the response schema sent with a structured-output request.

    The pydantic JSON schema is taken with camelCase aliases, every
    ``$ref`` is inlined, optional fields become ``nullable`` and keys the
    API rejects are removed.
    """
    schema = model.model_json_schema(by_alias=True)
    definitions = schema.pop("$defs", {})
    return _clean(schema, definitions)


def _clean(node: Any, definitions: dict[str, Any]) -> Any:
    if isinstance(node, list):
        return [_clean(item, definitions) for item in node]
    if not isinstance(node, dict):
        return node

    if "$ref" in node:
        ref_name = node["$ref"].split("/")[-1]
        if ref_name not in definitions:
            raise ValueError(f"Unresolvable schema reference: {node['$ref']}")
        resolved = copy.deepcopy(definitions[ref_name])
        # Sibling keys (description, nullable) win over the referenced definition
        resolved.update({k: v for k, v in node.items() if k != "$ref"})
        return _clean(resolved, definitions)

    any_of = node.get("anyOf")
    if any_of is not None:
        variants = [v for v in any_of if v.get("type") != "null"]
        if len(variants) == 1 and len(variants) < len(any_of):
            merged = {k: v for k, v in node.items() if k != "anyOf"}
            merged.update(variants[0])
            if "description" in node:
                merged["description"] = node["description"]
            merged["nullable"] = True
            return _clean(merged, definitions)

    cleaned = {}
    for key, value in node.items():
        if key in _STRIPPED_KEYS:
            continue
        if key == "properties":
            # Property names are field names, never schema keywords
            cleaned[key] = {name: _clean(prop, definitions) for name, prop in value.items()}
        else:
            cleaned[key] = _clean(value, definitions)
    return cleaned
