"""Node types produced by the chat markdown parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass(slots=True)
class PlainText:
    text: str


@dataclass(slots=True)
class Bold:
    text: str


@dataclass(slots=True)
class Italic:
    text: str


@dataclass(slots=True)
class Code:
    text: str


InlineSpan = PlainText | Bold | Italic | Code


@dataclass(slots=True)
class Header:
    level: int
    content: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Bullet:
    content: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Numbered:
    index: str
    content: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Paragraph:
    content: list[InlineSpan] = field(default_factory=list)


@dataclass(slots=True)
class Spacer:
    pass


BlockNode = Header | Bullet | Numbered | Paragraph | Spacer


def spans_text(spans: list[InlineSpan]) -> str:
    """Concatenate the visible text of *spans*, markers excluded."""
    return "".join(span.text for span in spans)


class Parser(Protocol):
    def parse(self, text: str) -> list[BlockNode]:  # pragma: no cover - structural protocol
        """Parse message text into block nodes."""

    def parse_path(self, input_path: Path) -> list[BlockNode]:  # pragma: no cover - structural protocol
        """Parse a text file into block nodes."""
