from chatmark.parser.base import Bold, Bullet, Header, Numbered, Paragraph, PlainText, Spacer
from chatmark.renderer.html_renderer import STREAMING_INDICATOR, HTMLRenderer
from chatmark.transcript import ChatMessage


def test_render_blocks_uses_block_classes() -> None:
    html = HTMLRenderer().render_blocks(
        [
            Header(level=2, content=[PlainText("Title")]),
            Spacer(),
            Bullet([PlainText("one")]),
            Numbered(index="3", content=[Bold("three")]),
            Paragraph([PlainText("body")]),
        ]
    )

    assert html.startswith('<div class="cm-message">')
    assert '<div class="cm-header cm-header-2">Title</div>' in html
    assert '<div class="cm-spacer"></div>' in html
    assert '<span class="cm-bullet-marker">•</span>' in html
    assert '<span class="cm-numbered-marker">3.</span>' in html
    assert '<strong class="cm-bold">three</strong>' in html
    assert '<p class="cm-paragraph">body</p>' in html
    assert STREAMING_INDICATOR not in html


def test_render_message_inline_spans_and_escaping() -> None:
    html = HTMLRenderer().render_message("Use *care* with `<script>` & **bold**")

    assert '<em class="cm-italic">care</em>' in html
    assert '<code class="cm-code">&lt;script&gt;</code>' in html
    assert "&amp;" in html
    assert "<script>" not in html


def test_streaming_indicator_appended() -> None:
    html = HTMLRenderer().render_message("typing", streaming=True)
    assert html.endswith(STREAMING_INDICATOR + "</div>")


def test_render_document_page() -> None:
    html = HTMLRenderer().render_document("# Hello\n- item", title="Notes <draft>")

    assert "<!DOCTYPE html>" in html
    assert "<title>Notes &lt;draft&gt;</title>" in html
    assert "cm-header-1" in html
    assert "cm-bullet" in html
    assert "cm-turn" not in html.split("<main", 1)[1]


def test_render_transcript_labels_and_loading() -> None:
    messages = [
        ChatMessage(role="user", content="What is **2+2**?", created_at="2025-01-01T10:00:00Z"),
        ChatMessage(role="assistant", content="It is `4`."),
    ]

    html = HTMLRenderer(assistant_name="Helper").render_transcript(messages, title="Math", loading=True)

    assert "<title>Math</title>" in html
    assert 'class="cm-turn cm-turn-user"' in html
    assert 'class="cm-turn cm-turn-assistant"' in html
    assert ">You<" in html
    assert ">Helper<" in html
    assert '<strong class="cm-bold">2+2</strong>' in html
    assert '<code class="cm-code">4</code>' in html
    assert 'datetime="2025-01-01T10:00:00Z"' in html
    assert html.count(STREAMING_INDICATOR) == 1


def test_transcript_without_loading_has_no_indicator() -> None:
    messages = [ChatMessage(role="assistant", content="done")]
    html = HTMLRenderer().render_transcript(messages)

    assert STREAMING_INDICATOR not in html
    assert "<title>Conversation</title>" in html
    assert ">Assistant<" in html
