"""Parse and serialize the ``---`` delimited header of rule and skill files.

Only the closed header vocabulary used by rule and skill documents is
understood: scalar strings (bare or quoted), ``true``/``false``, decimal
numbers, and block lists of scalars under a key with an empty value::

    ---
    description: "React: component rules"
    alwaysApply: false
    paths:
      - "**/*.tsx"
    ---

Nested mappings, flow sequences (``[a, b]``), multi-line scalars and comments
are not supported. A flow sequence is kept as its literal string; lines that
are neither ``key: value`` pairs nor list items are ignored.
"""

from __future__ import annotations

import re

from ai_rules.constants import FRONTMATTER_DELIMITER
from ai_rules.rules.models import Header, ParsedDocument

_KEY_VALUE_RE = re.compile(r"^([\w-]+):\s*(.*)$")
_LIST_ITEM_RE = re.compile(r"^\s*-\s+(.*)$")
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")
_QUOTE_TRIGGERS = (":", "#", "'", '"')


def parse_frontmatter(content: str) -> ParsedDocument:
    lines = content.split("\n")
    if lines[0].strip() != FRONTMATTER_DELIMITER:
        return ParsedDocument(header=None, body=content)

    end_index = -1
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            end_index = index
            break
    if end_index == -1:
        return ParsedDocument(header=None, body=content)

    header = _parse_header_lines(lines[1:end_index])
    body = "\n".join(lines[end_index + 1 :]).lstrip("\n")
    return ParsedDocument(header=header, body=body)


def _parse_header_lines(lines: list[str]) -> Header:
    result: Header = {}
    current_list: list | None = None

    for line in lines:
        if not line.strip():
            continue

        item = _LIST_ITEM_RE.match(line)
        if item:
            if current_list is not None:
                current_list.append(_parse_value(item.group(1).strip()))
            continue

        match = _KEY_VALUE_RE.match(line)
        if not match:
            continue
        key, raw_value = match.group(1), match.group(2).strip()
        if not raw_value:
            current_list = []
            result[key] = current_list
        else:
            current_list = None
            result[key] = _parse_value(raw_value)

    return result


def _parse_value(value: str) -> str | bool | int | float:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        inner = value[1:-1]
        if value[0] == '"':
            inner = inner.replace('\\"', '"')
        return inner
    if value == "true":
        return True
    if value == "false":
        return False
    if _NUMBER_RE.match(value):
        return float(value) if "." in value else int(value)
    return value


def serialize_frontmatter(header: Header) -> str:
    lines: list[str] = []
    for key, value in header.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            lines.append(f"{key}:")
            for item in value:
                lines.append(f'  - "{_escape(str(item))}"')
        elif isinstance(value, bool):
            lines.append(f"{key}: {'true' if value else 'false'}")
        elif isinstance(value, (int, float)):
            lines.append(f"{key}: {value}")
        elif isinstance(value, str):
            lines.append(f"{key}: {_format_string(value)}")
    return "\n".join(lines)


def _format_string(value: str) -> str:
    if (
        not value
        or value != value.strip()
        or value in ("true", "false")
        or _NUMBER_RE.match(value)
        or any(char in value for char in _QUOTE_TRIGGERS)
    ):
        return f'"{_escape(value)}"'
    return value


def _escape(value: str) -> str:
    return value.replace('"', '\\"')


def build_content(header: Header | None, body: str) -> str:
    if not header:
        return body
    serialized = serialize_frontmatter(header)
    return (
        f"{FRONTMATTER_DELIMITER}\n{serialized}\n{FRONTMATTER_DELIMITER}\n\n{body}"
    )
