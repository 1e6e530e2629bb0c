"""Parser package."""

from .base import BlockNode, Bold, Bullet, Code, Header, InlineSpan, Italic, Numbered, Paragraph, PlainText, Spacer
from .inline import parse_inline
from .md_parser import MarkdownParser, parse_markdown

__all__ = [
    "BlockNode",
    "Bold",
    "Bullet",
    "Code",
    "Header",
    "InlineSpan",
    "Italic",
    "Numbered",
    "Paragraph",
    "PlainText",
    "Spacer",
    "MarkdownParser",
    "parse_inline",
    "parse_markdown",
]
