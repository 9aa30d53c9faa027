"""Value formatting helpers shared by the request assembler.

Synthesised and literal example values can be of any JSON type. Path, query,
and header positions need a *string* form of them, while the request body is
serialised as structured JSON. These helpers keep both conversions in one
place so that every position renders the same value the same way.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

# Characters left unescaped in a URI component (RFC 3986 unreserved plus
# the sub-delims that are conventionally kept: ! * ' ( ) ).
_URI_COMPONENT_SAFE = "-_.!~*'()"


def to_display_string(value: Any) -> str:  # noqa: ANN401
    """Coerce *value* to the string used in a URL or header.

    * ``True``/``False`` -> ``"true"``/``"false"`` (JSON spelling)
    * ``None`` -> ``"null"``
    * integral floats -> integer form (``1.0`` -> ``"1"``)
    * lists -> comma-joined string forms of their items
    * dicts -> compact JSON
    * anything else -> ``str(value)``

    Example::

        >>> to_display_string(True)
        'true'
        >>> to_display_string([1, "a", False])
        '1,a,false'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(to_display_string(item) for item in value)
    if isinstance(value, dict):
        return to_compact_json(value)
    return str(value)


def encode_uri_component(value: Any) -> str:  # noqa: ANN401
    """Percent-encode the string form of *value* for use in a URL component.

    Example::

        >>> encode_uri_component("a b/c")
        'a%20b%2Fc'
    """
    return quote(to_display_string(value), safe=_URI_COMPONENT_SAFE)


def to_compact_json(value: Any) -> str:  # noqa: ANN401
    """Serialise *value* as JSON without insignificant whitespace.

    Non-ASCII characters are kept as-is and integral floats are written as
    integers (see :func:`collapse_integral_floats`).
    """
    return json.dumps(
        collapse_integral_floats(value), separators=(",", ":"), ensure_ascii=False
    )


def collapse_integral_floats(value: Any) -> Any:  # noqa: ANN401
    """Return a copy of *value* with every integral float replaced by an int.

    Lists and dicts are walked recursively. ``10.0`` becomes ``10`` so that a
    number renders the same in a body as it does in a URL or header.

    Example::

        >>> collapse_integral_floats({"amount": 10.0, "rate": [0.5, 2.0]})
        {'amount': 10, 'rate': [0.5, 2]}
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [collapse_integral_floats(item) for item in value]
    if isinstance(value, dict):
        return {key: collapse_integral_floats(item) for key, item in value.items()}
    return value
