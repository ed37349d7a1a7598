"""Rule and skill document models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

HeaderValue = Union[str, bool, int, float, list, None]
Header = dict[str, Any]


@dataclass(frozen=True)
class ParsedDocument:
    header: Header | None
    body: str

    @property
    def is_global(self) -> bool:
        return self.header is not None and self.header.get("alwaysApply") is True

    @property
    def description(self) -> str | None:
        if self.header is None:
            return None
        value = self.header.get("description")
        return str(value) if value else None


@dataclass(frozen=True)
class RuleOutput:
    content: str
    filename: str
    is_global: bool = False
    skill_dir: str | None = None
    workflow_dir: str | None = None


@dataclass(frozen=True)
class GlobalRule:
    """A rule marked alwaysApply, kept in its canonical (untransformed) form."""

    content: str
    source_path: str


@dataclass(frozen=True)
class AggregateOutput:
    filename: str
    content: str


@dataclass(frozen=True)
class SourceDocument:
    """A canonical document read from the source tree.

    ``relative_path`` is POSIX-style and relative to the rules or skills root
    it was found under; it is the document's identity within that set.
    """

    relative_path: str
    content: str

    @property
    def relative_dir(self) -> str:
        head, _, _ = self.relative_path.rpartition("/")
        return head or "."
