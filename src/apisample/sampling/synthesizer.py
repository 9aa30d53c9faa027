"""Derive a representative example value from a schema node.

:func:`generate_example` is total: it accepts any value (a full schema, a
partial one, ``None``, or something that is not a schema at all) and always
returns a value. Unrecognised shapes fall through to the ``"example"``
placeholder so that an incomplete specification never blocks sample
generation.

Precedence, first match wins:

1. Absent node -- ``"example"``.
2. Explicit ``example`` -- returned verbatim.
3. ``default`` -- returned verbatim.
4. Non-empty ``enum`` -- its first element.
5. ``type`` dispatch -- see :data:`_PRIMITIVE_EXAMPLES`, plus recursive
   handling of ``array`` and ``object``.

``$ref``, composition keywords (``oneOf``/``allOf``/``anyOf``), and
``format``-aware values are not interpreted. Schemas are assumed acyclic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PLACEHOLDER = "example"
"""Value synthesised for absent nodes and unrecognised types."""

_PRIMITIVE_EXAMPLES: dict[str, Any] = {
    "string": "string",
    "integer": 0,
    "number": 0,
    "boolean": True,
}


def generate_example(schema: Any) -> Any:  # noqa: ANN401
    """Return one representative value for *schema*.

    Args:
        schema: A JSON-Schema-like mapping (``type``, ``example``,
            ``default``, ``enum``, ``items``, ``properties``), or ``None``.

    Returns:
        The synthesised value. Objects keep their declared property order.

    Example::

        >>> generate_example({"type": "object", "properties": {"amount": {"type": "number"}}})
        {'amount': 0}
        >>> generate_example({"type": "array", "items": {"enum": ["EUR", "USD"]}})
        ['EUR']
        >>> generate_example(None)
        'example'
    """
    if not isinstance(schema, Mapping):
        return PLACEHOLDER
    if "example" in schema:
        return schema["example"]
    if "default" in schema:
        return schema["default"]

    enum = schema.get("enum")
    if isinstance(enum, list) and enum:
        return enum[0]

    schema_type = schema.get("type")
    if not isinstance(schema_type, str):
        return PLACEHOLDER

    if schema_type in _PRIMITIVE_EXAMPLES:
        return _PRIMITIVE_EXAMPLES[schema_type]
    if schema_type == "array":
        return [generate_example(schema.get("items"))]
    if schema_type == "object":
        properties = schema.get("properties")
        if not isinstance(properties, Mapping):
            return {}
        return {name: generate_example(prop) for name, prop in properties.items()}
    return PLACEHOLDER
