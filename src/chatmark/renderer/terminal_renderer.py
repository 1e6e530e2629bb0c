"""Render block nodes as ANSI-styled terminal text."""

from __future__ import annotations

import click

from chatmark.parser.base import BlockNode, Bold, Bullet, Code, Header, InlineSpan, Italic, Numbered, Paragraph, Spacer

STREAMING_INDICATOR = "▌"


class TerminalRenderer:
    """Lay out block nodes one per line, styled with ``click.style``."""

    def render(self, blocks: list[BlockNode], *, streaming: bool = False) -> str:
        lines = [self._render_block(block) for block in blocks]
        if streaming:
            if lines:
                lines[-1] += click.style(STREAMING_INDICATOR, fg="magenta")
            else:
                lines.append(click.style(STREAMING_INDICATOR, fg="magenta"))
        return "\n".join(lines)

    def _render_block(self, block: BlockNode) -> str:
        if isinstance(block, Spacer):
            return ""
        if isinstance(block, Header):
            return _render_header(block)
        if isinstance(block, Bullet):
            return "  " + click.style("•", fg="magenta", bold=True) + " " + _render_spans(block.content)
        if isinstance(block, Numbered):
            return "  " + click.style(f"{block.index}.", fg="blue", bold=True) + " " + _render_spans(block.content)
        if isinstance(block, Paragraph):
            return _render_spans(block.content)
        return ""


def _render_header(block: Header) -> str:
    underline = block.level == 1
    return "".join(
        click.style(span.text, bold=True, underline=underline, fg="cyan" if isinstance(span, Code) else None)
        for span in block.content
    )


def _render_spans(spans: list[InlineSpan]) -> str:
    parts: list[str] = []
    for span in spans:
        if isinstance(span, Bold):
            parts.append(click.style(span.text, bold=True))
        elif isinstance(span, Italic):
            parts.append(click.style(span.text, italic=True))
        elif isinstance(span, Code):
            parts.append(click.style(span.text, fg="cyan"))
        else:
            parts.append(span.text)
    return "".join(parts)
