"""Inline span resolution for bold, italic and code markers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import Bold, Code, InlineSpan, Italic, PlainText

# Any character but a line terminator, matching "." in a browser regex.
LINE_CHAR = r"[^\r\n\u2028\u2029]"

_BOLD_RE = re.compile(rf"\*\*({LINE_CHAR}*?)\*\*")
_ITALIC_RE = re.compile(rf"\*({LINE_CHAR}*?)\*")
_CODE_RE = re.compile(rf"`({LINE_CHAR}*?)`")


@dataclass(slots=True)
class _Match:
    start: int
    end: int
    kind: type[Bold] | type[Italic] | type[Code]
    text: str


def parse_inline(text: str) -> list[InlineSpan]:
    """Split a single line into ordered plain/bold/italic/code spans.

    Bold runs are collected first; an italic match is dropped when it starts
    inside any bold range, since ``**x**`` also contains ``*x*``-shaped text.
    Code matches are not checked against either, so input like *a`b*c` can
    produce spans that overlap. They are emitted in start order and the
    cursor jumps to each match end.
    """
    bold = _find(_BOLD_RE, text, Bold)
    italic = [
        m for m in _find(_ITALIC_RE, text, Italic)
        if not any(b.start <= m.start < b.end for b in bold)
    ]
    code = _find(_CODE_RE, text, Code)

    # sorted() is stable: ties keep bold, italic, code order.
    matches = sorted(bold + italic + code, key=lambda m: m.start)
    if not matches:
        return [PlainText(text)]

    spans: list[InlineSpan] = []
    cursor = 0
    for match in matches:
        if cursor < match.start:
            spans.append(PlainText(text[cursor:match.start]))
        spans.append(match.kind(match.text))
        cursor = match.end

    if cursor < len(text):
        spans.append(PlainText(text[cursor:]))

    return spans


def _find(pattern: re.Pattern[str], text: str, kind: type[Bold] | type[Italic] | type[Code]) -> list[_Match]:
    return [_Match(m.start(), m.end(), kind, m.group(1)) for m in pattern.finditer(text)]
