"""Unit tests for the span translator."""

import pytest

from emojify.engine import Direction, Span, SpanKind, Translator

GRIN = "\U0001f601"


@pytest.fixture
def translator(small_table):
    return Translator(small_table)


class TestTranslate:
    """Test translating single spans."""

    def test_encode_alias(self, translator):
        """Test an alias span becomes its emoji."""
        span = Span(0, 7, SpanKind.ALIAS, ":smile:")
        assert translator.translate(span, Direction.ENCODE) == GRIN

    def test_decode_emoji_uses_canonical_name(self, translator):
        """Test an emoji span becomes its canonical alias."""
        span = Span(0, 1, SpanKind.EMOJI, GRIN)
        assert translator.translate(span, Direction.DECODE) == ":grin:"

    def test_literal_passes_through(self, translator):
        """Test literal spans are copied."""
        span = Span(0, 6, SpanKind.LITERAL, ":grin:")
        assert translator.translate(span, Direction.ENCODE) == ":grin:"

    def test_unresolved_alias_passes_through(self, translator):
        """Test a span without an entry is copied."""
        span = Span(0, 10, SpanKind.ALIAS, ":notareal:")
        assert translator.translate(span, Direction.ENCODE) == ":notareal:"

    def test_wrong_direction_passes_through(self, translator):
        """Test a span kind that does not fit the direction is copied."""
        span = Span(0, 1, SpanKind.EMOJI, GRIN)
        assert translator.translate(span, Direction.ENCODE) == GRIN


class TestRender:
    """Test rendering span lists."""

    def test_render_in_order(self, translator):
        """Test render() joins spans in order."""
        spans = [
            Span(0, 6, SpanKind.LITERAL, "Hello "),
            Span(6, 12, SpanKind.ALIAS, ":grin:"),
            Span(12, 13, SpanKind.LITERAL, "!"),
        ]
        assert translator.render(spans, Direction.ENCODE) == f"Hello {GRIN}!"

    def test_render_empty(self, translator):
        """Test rendering no spans."""
        assert translator.render([], Direction.DECODE) == ""
