"""Render parsed chat messages into HTML."""

from __future__ import annotations

import html
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from chatmark.parser.base import (
    BlockNode,
    Bold,
    Bullet,
    Code,
    Header,
    InlineSpan,
    Italic,
    Numbered,
    Paragraph,
    Parser,
    Spacer,
)
from chatmark.parser.md_parser import MarkdownParser
from chatmark.transcript import ChatMessage

STREAMING_INDICATOR = '<span class="cm-cursor" aria-hidden="true"></span>'


@dataclass(slots=True)
class RenderedMessage:
    role: str
    label: str
    created_at: str | None
    html: str


class HTMLRenderer:
    """Render block nodes as HTML fragments and full transcript pages."""

    def __init__(
        self,
        template_path: Path | None = None,
        *,
        assistant_name: str = "Assistant",
        parser: Parser | None = None,
    ) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "transcript.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name
        self._parser = parser or MarkdownParser()
        self.assistant_name = assistant_name

    def render_message(self, text: str, *, streaming: bool = False) -> str:
        return self.render_blocks(self._parser.parse(text), streaming=streaming)

    def render_blocks(self, blocks: list[BlockNode], *, streaming: bool = False) -> str:
        parts = [self._render_block(block) for block in blocks]
        if streaming:
            parts.append(STREAMING_INDICATOR)
        return '<div class="cm-message">' + "".join(parts) + "</div>"

    def render_document(self, text: str, *, title: str | None = None, streaming: bool = False) -> str:
        """Render a single markdown text as a standalone page."""
        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=title or "Untitled",
            document_html=self.render_message(text, streaming=streaming),
            messages=[],
        )

    def render_transcript(
        self,
        messages: list[ChatMessage],
        *,
        title: str | None = None,
        loading: bool = False,
    ) -> str:
        """Render a chat history as a standalone page.

        While ``loading`` is set the final assistant message carries the
        streaming indicator, as it would while its reply is still arriving.
        """
        rendered: list[RenderedMessage] = []
        last = len(messages) - 1
        for idx, message in enumerate(messages):
            streaming = loading and idx == last and message.role == "assistant"
            rendered.append(
                RenderedMessage(
                    role=message.role,
                    label="You" if message.role == "user" else self.assistant_name,
                    created_at=message.created_at,
                    html=self.render_message(message.content, streaming=streaming),
                )
            )

        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=title or "Conversation",
            document_html=None,
            messages=rendered,
        )

    def _render_block(self, block: BlockNode) -> str:
        if isinstance(block, Spacer):
            return '<div class="cm-spacer"></div>'

        if isinstance(block, Header):
            level = max(1, min(3, block.level))
            return f'<div class="cm-header cm-header-{level}">{self._render_spans(block.content)}</div>'

        if isinstance(block, Bullet):
            return (
                '<div class="cm-bullet"><span class="cm-bullet-marker">•</span>'
                f'<span class="cm-item">{self._render_spans(block.content)}</span></div>'
            )

        if isinstance(block, Numbered):
            return (
                f'<div class="cm-numbered"><span class="cm-numbered-marker">{html.escape(block.index)}.</span>'
                f'<span class="cm-item">{self._render_spans(block.content)}</span></div>'
            )

        if isinstance(block, Paragraph):
            return f'<p class="cm-paragraph">{self._render_spans(block.content)}</p>'

        return ""

    def _render_spans(self, spans: list[InlineSpan]) -> str:
        return "".join(_render_span(span) for span in spans)


def _render_span(span: InlineSpan) -> str:
    text = html.escape(span.text)
    if isinstance(span, Bold):
        return f'<strong class="cm-bold">{text}</strong>'
    if isinstance(span, Italic):
        return f'<em class="cm-italic">{text}</em>'
    if isinstance(span, Code):
        return f'<code class="cm-code">{text}</code>'
    return text
