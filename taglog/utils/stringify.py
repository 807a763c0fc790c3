"""
Depth-limited serialization of log call details

Renders arbitrary structured values as indented JSON, pruning nested
branches once the depth bound is exhausted.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Tuple

INDENT = 2


def _is_branch(value: Any) -> bool:
    """Return True for values whose items are copied recursively."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return (
        isinstance(value, (Mapping, list, tuple))
        or hasattr(value, "__dict__")
    )


def _items(value: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield str(key), item
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield str(index), item
    else:
        for key, item in vars(value).items():
            if not key.startswith("_"):
                yield key, item


def _cut(value: Any, depth: int) -> Dict[str, Any]:
    # A pruned branch still yields an (empty) mapping, and the caller keeps
    # it; nested objects past the bound therefore render as {}.
    result: Dict[str, Any] = {}
    if depth == 0:
        return result
    for key, item in _items(value):
        if _is_branch(item):
            result[key] = _cut(item, depth - 1)
        else:
            result[key] = item
    return result


def stringify(value: Any, depth: int) -> str:
    """
    Serialize ``value`` to 2-space indented JSON, at most ``depth`` levels deep.

    Args:
        value: Detail value passed to a log call
        depth: Non-negative depth bound

    Returns:
        JSON text

    Example:
        stringify({"a": 1, "b": {"c": 2, "d": {"e": 3}}}, 2)
        # -> a and b.c are kept, b.d renders as {}
    """
    if depth < 0:
        raise ValueError("depth cannot be negative")
    if _is_branch(value):
        value = _cut(value, depth)
    return json.dumps(value, indent=INDENT, default=str)
