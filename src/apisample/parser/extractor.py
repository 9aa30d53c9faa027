"""Extract operation summaries and operation documents from an OpenAPI spec.

This module walks the ``paths`` object of a raw OpenAPI dictionary and
produces the two shapes served by
:class:`~apisample.lookup.local.LocalSpecLookup`:

* :func:`extract_operation_summaries` -- one small dict per operation
  (method, path, operationId, summary, description, tags), the input to
  operation search.
* :func:`extract_operation_document` -- the full description of a single
  operation (servers, path, parameters, requestBody, ...), the input to the
  request assembler.

Parameter merging follows the OpenAPI specification: path-level parameters
provide defaults, and operation-level parameters override them when they share
the same ``name`` and ``in`` values. Servers follow the same override chain
(operation, then path item, then document).
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

# Declaration order of the OpenAPI Path Item Object.
_HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def extract_operation_summaries(spec: dict[str, Any]) -> list[dict[str, Any]]:
    """List every operation in *spec* as a search-friendly summary.

    Args:
        spec: The raw spec dictionary.

    Returns:
        A list of dicts with ``method`` (uppercase), ``path``,
        ``operationId``, ``summary``, ``description``, and ``tags``, in
        document order. Absent optional fields are omitted.
    """
    summaries: list[dict[str, Any]] = []
    for path, method, operation, _ in _iter_operations(spec):
        summary: dict[str, Any] = {"method": method.upper(), "path": path}
        for key in ("operationId", "summary", "description"):
            if operation.get(key) is not None:
                summary[key] = operation[key]
        summary["tags"] = _tags(operation)
        summaries.append(summary)
    return summaries


def extract_operation_document(
    spec: dict[str, Any],
    method: str,
    path: str,
) -> Optional[dict[str, Any]]:
    """Build the operation document for one (method, path) pair.

    Args:
        spec: The raw spec dictionary.
        method: HTTP method, matched case-insensitively.
        path: Path template, matched exactly (e.g. ``/accounts/{id}``).

    Returns:
        The operation document, or ``None`` when the spec declares no such
        operation.

    Example::

        doc = extract_operation_document(raw, "get", "/pets/{petId}")
        doc["servers"]     # [{"url": "https://api.example.com/v1"}]
        doc["parameters"]  # path-level and operation-level, merged
    """
    wanted = method.lower()
    for op_path, op_method, operation, path_item in _iter_operations(spec):
        if op_path != path or op_method != wanted:
            continue

        document: dict[str, Any] = {
            "method": op_method.upper(),
            "path": op_path,
        }
        for key in ("operationId", "summary", "description"):
            if operation.get(key) is not None:
                document[key] = operation[key]
        document["tags"] = _tags(operation)
        document["servers"] = _resolve_servers(spec, path_item, operation)
        document["parameters"] = _merge_parameters(
            _as_list(path_item.get("parameters")),
            _as_list(operation.get("parameters")),
        )
        if operation.get("requestBody") is not None:
            document["requestBody"] = operation["requestBody"]
        return document
    return None


def _iter_operations(
    spec: dict[str, Any],
) -> Iterator[tuple[str, str, dict[str, Any], dict[str, Any]]]:
    """Yield ``(path, method, operation, path_item)`` for every operation."""
    paths = spec.get("paths") or {}
    if not isinstance(paths, dict):
        return
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        for method in _HTTP_METHODS:
            operation = path_item.get(method)
            if isinstance(operation, dict):
                yield path, method, operation, path_item


def _resolve_servers(
    spec: dict[str, Any],
    path_item: dict[str, Any],
    operation: dict[str, Any],
) -> list[Any]:
    """Pick the most specific non-empty ``servers`` array."""
    for source in (operation, path_item, spec):
        servers = source.get("servers")
        if isinstance(servers, list) and servers:
            return servers
    return []


def _merge_parameters(
    path_params: list[Any],
    op_params: list[Any],
) -> list[Any]:
    """Merge path-level and operation-level parameters.

    Operation-level parameters override path-level parameters with the same
    ``name`` and ``in``. Path-level parameters come first.
    """
    overridden = {
        (param.get("name"), param.get("in"))
        for param in op_params
        if isinstance(param, dict)
    }
    merged = [
        param
        for param in path_params
        if not isinstance(param, dict)
        or (param.get("name"), param.get("in")) not in overridden
    ]
    merged.extend(op_params)
    return merged


def _tags(operation: dict[str, Any]) -> list[Any]:
    tags = operation.get("tags")
    return list(tags) if isinstance(tags, list) else []


def _as_list(value: Any) -> list[Any]:  # noqa: ANN401
    return value if isinstance(value, list) else []
