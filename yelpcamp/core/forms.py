"""Form Decoder — turns bracketed urlencoded keys into nested mappings.

Invariants:
    - "campground[title]=x" decodes to {"campground": {"title": "x"}}
    - Repeated keys collect into a list, in submission order
    - Malformed bracket keys are kept literally
"""

import re
from typing import Any, Iterable

_BRACKET_PART = re.compile(r"\[([^\[\]]*)\]")


def split_key(key: str) -> list[str]:
    head, sep, rest = key.partition("[")
    if not sep or not head:
        return [key]
    tail = sep + rest
    parts = _BRACKET_PART.findall(tail)
    if "".join(f"[{p}]" for p in parts) != tail:
        return [key]
    while parts and parts[-1] == "":
        parts.pop()  # "tags[]" is just a repeated "tags"
    return [head, *parts]


def parse_nested_form(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Decode (key, value) pairs the way an extended urlencoded parser does."""
    data: dict[str, Any] = {}
    for key, value in items:
        path = split_key(key)
        node = data
        for part in path[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        leaf = path[-1]
        if leaf not in node:
            node[leaf] = value
        elif isinstance(node[leaf], list):
            node[leaf].append(value)
        else:
            node[leaf] = [node[leaf], value]
    return data
