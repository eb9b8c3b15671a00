"""Nested path assignment for structured request bodies.

Paths use the dotted/bracket notation of form builders:
``user.name``, ``items[0].id``, ``filter[status]``, ``meta["content.type"]``.
Every path is accepted: stray dots produce empty keys (``price.`` is
``["price", ""]``). Index segments create lists when the container does not
exist yet, anything else creates a dict. Lists are padded with ``None`` up to
the assigned index, and a list that receives a named key becomes a dict keyed
by the stringified indexes.
"""

import re
from typing import Any

_PROPERTY_NAME = re.compile(
    r"""[^.\[\]]+"""
    r"""|\[(?:(-?\d+(?:\.\d+)?)|(["'])((?:(?!\2)[^\\]|\\.)*?)\2)\]"""
    r"""|(?=(?:\.|\[\])(?:\.|\[\]|$))""",
)
_ESCAPE_CHAR = re.compile(r"\\(\\)?")
_INDEX = re.compile(r"0|[1-9]\d*")

Container = dict[str, Any] | list[Any]


def parse_path(path: str) -> list[str]:
    if not path or not re.search(r"[.\[\]]", path):
        return [path]

    keys = [""] if path.startswith(".") else []

    for match in _PROPERTY_NAME.finditer(path):
        number, quote, quoted = match.groups()

        if quote:
            keys.append(_ESCAPE_CHAR.sub(lambda escape: escape.group(1) or "", quoted))
        elif number:
            keys.append(number)
        else:
            keys.append(match.group())

    return keys


def is_index(key: str) -> bool:
    return _INDEX.fullmatch(key) is not None


def set_path(target: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Assign ``value`` at ``path`` inside ``target``, in place.

    Returns ``target`` so the call can be used as a reducer step.
    """
    keys = parse_path(path)
    node: Container = target

    for key, next_key in zip(keys, keys[1:], strict=False):
        child = _get_child(node, key)

        if isinstance(child, list) and not is_index(next_key):
            child = {str(index): item for index, item in enumerate(child)}
            _set_child(node, key, child)
        elif not isinstance(child, dict | list):
            child = [] if is_index(next_key) else {}
            _set_child(node, key, child)

        node = child

    _set_child(node, keys[-1], value)
    return target


def _get_child(node: Container, key: str) -> Any:
    if isinstance(node, dict):
        return node.get(key)

    index = int(key)
    return node[index] if index < len(node) else None


def _set_child(node: Container, key: str, value: Any) -> None:
    # A list only ever receives index keys; named keys convert it to a dict first.
    if isinstance(node, dict):
        node[key] = value
        return

    index = int(key)

    if index >= len(node):
        node.extend([None] * (index + 1 - len(node)))

    node[index] = value
