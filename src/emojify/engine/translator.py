"""Span translator.

Resolves scanned spans against the alias table and produces output text.
Literal spans, and any span that does not resolve, are emitted exactly
as they were read.
"""

from collections.abc import Iterable

from ..table.alias_table import AliasTable
from .types import Direction, Span, SpanKind


class Translator:
    """Turns spans into output text for one direction at a time."""

    def __init__(self, table: AliasTable):
        self.table = table

    def translate(self, span: Span, direction: Direction) -> str:
        """Output text for a single span.

        ALIAS spans encode to the entry's emoji sequence, EMOJI spans
        decode to the canonical ``:alias:``. Everything else, including a
        span whose kind does not belong to ``direction``, passes through.
        """
        if direction is Direction.ENCODE and span.kind is SpanKind.ALIAS:
            entry = self.table.lookup_alias(span.payload[1:-1])
            return entry.sequence if entry is not None else span.payload
        if direction is Direction.DECODE and span.kind is SpanKind.EMOJI:
            entry = self.table.lookup_sequence(span.payload)
            return entry.alias_token if entry is not None else span.payload
        return span.payload

    def render(self, spans: Iterable[Span], direction: Direction) -> str:
        return "".join(self.translate(span, direction) for span in spans)
