"""Tests for inline span resolution.

Covers:
- Bold, italic and code spans with surrounding plain text
- Italic suppression inside bold ranges
- Lazy matching and unterminated markers
- Text reconstruction
- Code/emphasis overlap (known edge case, emitted in start order)
"""

from __future__ import annotations

from chatmark.parser.base import Bold, Code, Italic, PlainText, spans_text
from chatmark.parser.inline import parse_inline


# ---------------------------------------------------------------------------
# Basic spans
# ---------------------------------------------------------------------------

def test_plain_line_is_single_span() -> None:
    assert parse_inline("just words") == [PlainText("just words")]


def test_bold_then_italic() -> None:
    assert parse_inline("**bold** and *italic*") == [
        Bold("bold"),
        PlainText(" and "),
        Italic("italic"),
    ]


def test_code_span() -> None:
    assert parse_inline("run `npm test` now") == [
        PlainText("run "),
        Code("npm test"),
        PlainText(" now"),
    ]


def test_mixed_spans_in_start_order() -> None:
    spans = parse_inline("`x` then **y** then *z*!")
    assert spans == [
        Code("x"),
        PlainText(" then "),
        Bold("y"),
        PlainText(" then "),
        Italic("z"),
        PlainText("!"),
    ]


# ---------------------------------------------------------------------------
# Bold / italic precedence
# ---------------------------------------------------------------------------

def test_italic_inside_bold_is_suppressed() -> None:
    assert parse_inline("**a*b*c**") == [Bold("a*b*c")]


def test_lazy_bold_matches_shortest_pair() -> None:
    assert parse_inline("**a** b **c**") == [Bold("a"), PlainText(" b "), Bold("c")]


def test_empty_bold_markers() -> None:
    assert parse_inline("****") == [Bold("")]


def test_single_star_is_plain() -> None:
    assert parse_inline("2 * 3 = 6") == [PlainText("2 * 3 = 6")]


def test_unterminated_bold_falls_back_to_italic_pairs() -> None:
    # "**open" has no closing "**"; the two stars pair up as an empty italic.
    assert parse_inline("**open") == [Italic(""), PlainText("open")]


def test_unterminated_code_is_plain() -> None:
    assert parse_inline("a `b") == [PlainText("a `b")]


# ---------------------------------------------------------------------------
# Reconstruction
# ---------------------------------------------------------------------------

def test_reconstruction_strips_only_markers() -> None:
    line = "Use **strong** words, *soft* tone and `code` blocks."
    assert spans_text(parse_inline(line)) == "Use strong words, soft tone and code blocks."


def test_spans_are_contiguous_for_simple_lines() -> None:
    line = "a **b** c *d* e `f` g"
    spans = parse_inline(line)
    assert [type(s) for s in spans] == [PlainText, Bold, PlainText, Italic, PlainText, Code, PlainText]
    assert spans_text(spans) == "a b c d e f g"


# ---------------------------------------------------------------------------
# Known edge case: code and italic overlap
# ---------------------------------------------------------------------------

def test_code_italic_overlap_emits_both_in_start_order() -> None:
    # Italic covers "*a`b*" and code covers "`b*c`"; neither is dropped.
    spans = parse_inline("*a`b*c`")
    assert spans == [Italic("a`b"), Code("b*c")]


def test_markers_do_not_pair_across_carriage_return() -> None:
    assert parse_inline("*a\rb* `c\rd`") == [PlainText("*a\rb* `c\rd`")]
