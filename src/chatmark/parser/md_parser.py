"""Line-based Markdown parser for chat messages."""

from __future__ import annotations

import re
from pathlib import Path

from .base import BlockNode, Bullet, Header, Numbered, Paragraph, Spacer
from .inline import LINE_CHAR, parse_inline

_HEADER_RE = re.compile(rf"^(#{{1,3}})\s+({LINE_CHAR}+)$")
_BULLET_RE = re.compile(rf"^[*-]\s+({LINE_CHAR}+)$")
_NUMBERED_RE = re.compile(rf"^([0-9]+)\.\s+({LINE_CHAR}+)$")


class MarkdownParser:
    """Parse chat message text into block nodes, one node per source line."""

    def parse(self, text: str) -> list[BlockNode]:
        if not text:
            return []
        return [_parse_line(line) for line in text.split("\n")]

    def parse_path(self, input_path: Path) -> list[BlockNode]:
        input_path = Path(input_path)
        return self.parse(input_path.read_text(encoding="utf-8", errors="ignore"))


def parse_markdown(text: str) -> list[BlockNode]:
    """Shortcut for ``MarkdownParser().parse(text)``."""
    return MarkdownParser().parse(text)


def _parse_line(line: str) -> BlockNode:
    if not line.strip():
        return Spacer()

    m = _HEADER_RE.match(line)
    if m:
        return Header(level=len(m.group(1)), content=parse_inline(m.group(2)))

    m = _BULLET_RE.match(line)
    if m:
        return Bullet(content=parse_inline(m.group(1)))

    m = _NUMBERED_RE.match(line)
    if m:
        return Numbered(index=m.group(1), content=parse_inline(m.group(2)))

    return Paragraph(content=parse_inline(line))
