"""
Dotted-path lookup into nested input data.

A field name such as ``user.emails.0`` walks mappings by key and sequences by
integer index. A name without dots is a plain key lookup, so a literal key
containing a dot is still found when it exists at the top level.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()
_INDEX_RE = re.compile(r"-?[0-9]+")


def _walk(data: Any, path: str) -> Any:
    if isinstance(data, Mapping) and path in data:
        return data[path]

    node = data
    for segment in path.split("."):
        if isinstance(node, Mapping):
            if segment not in node:
                return _MISSING
            node = node[segment]
        elif isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
            if not _INDEX_RE.fullmatch(segment):
                return _MISSING
            index = int(segment)
            if not -len(node) <= index < len(node):
                return _MISSING
            node = node[index]
        else:
            return _MISSING
    return node


def has_key(data: Mapping[str, Any], path: str) -> bool:
    """
    Check whether a (possibly dotted) field exists in the data.

    An explicit ``None`` value counts as present.

    Examples:
        >>> has_key({"foo": None}, "foo")
        True
        >>> has_key({"user": {"name": "ann"}}, "user.email")
        False
    """
    return _walk(data, path) is not _MISSING


def dot_array_search(path: str, data: Mapping[str, Any], default: Any = None) -> Any:
    """
    Return the value at a (possibly dotted) path, or ``default`` when absent.

    Examples:
        >>> dot_array_search("user.tags.1", {"user": {"tags": ["a", "b"]}})
        'b'
    """
    value = _walk(data, path)
    return default if value is _MISSING else value
