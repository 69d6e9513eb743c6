"""Span scanner for alias tokens and emoji sequences.

Scanner classifies text into LITERAL, ALIAS and EMOJI spans:
- Encode mode finds ``:name:`` tokens whose name is a known alias
- Decode mode finds the longest known emoji sequence at each position,
  never splitting a modified, joined or flag sequence

Both modes can scan a partial buffer (``final=False``). Whenever a
classification depends on text past the end of the buffer, scanning
stops and the undecided tail is returned as ``pending`` so the caller
can retry once more input has arrived. Decisions only ever look at a
bounded window, so the pending tail stays small.
"""

import logging

from ..table.alias_table import AliasTable
from ..table.types import ALIAS_CHARSET
from .types import Direction, ScanResult, Span, SpanKind

logger = logging.getLogger(__name__)

ZWJ = "\u200d"
VS15 = "\ufe0e"
VS16 = "\ufe0f"
COMBINING_KEYCAP = "\u20e3"

_SIMPLE_EXTENDERS = frozenset((VS15, VS16, ZWJ, COMBINING_KEYCAP))
_PICTOGRAPHIC_EXTRAS = frozenset("\u00a9\u00ae\u203c\u2049\u2122\u2139\u3030\u303d\u3297\u3299")


def is_skin_tone(char: str) -> bool:
    return "\U0001f3fb" <= char <= "\U0001f3ff"


def is_tag(char: str) -> bool:
    return "\U000e0020" <= char <= "\U000e007f"


def is_regional_indicator(char: str) -> bool:
    return "\U0001f1e6" <= char <= "\U0001f1ff"


def is_extender(char: str) -> bool:
    """Whether ``char`` continues the emoji sequence before it."""
    return char in _SIMPLE_EXTENDERS or is_skin_tone(char) or is_tag(char)


def is_pictographic(char: str) -> bool:
    """Rough test for a codepoint that can take part in an emoji sequence."""
    return char >= "\U0001f000" or "\u2190" <= char <= "\u2bff" or char in _PICTOGRAPHIC_EXTRAS


class Scanner:
    """Classifies text into spans against one AliasTable.

    The scanner holds no per-stream state; one instance can serve any
    number of pipelines.

    Example:
        scanner = Scanner(table)
        result = scanner.scan("Hello :grin:", Direction.ENCODE)
        [span.kind for span in result.spans]   # [LITERAL, ALIAS]

    """

    def __init__(self, table: AliasTable):
        self.table = table
        self.alias_window = table.max_alias_length
        # Cap on how far an unknown emoji sequence is followed
        self.sequence_window = max(table.max_sequence_length, 1) + 1

    def scan(self, text: str, direction: Direction, *, final: bool = True, preceding: str = "") -> ScanResult:
        """Scan ``text`` for spans in the given direction.

        Args:
            text: Text to classify
            direction: ENCODE looks for aliases, DECODE for emoji
            final: False when more text may follow
            preceding: Text consumed just before ``text`` (only its last
                two codepoints matter, and only for DECODE)

        Returns:
            ScanResult whose spans cover ``text[:consumed]``

        """
        if direction is Direction.ENCODE:
            return self.scan_aliases(text, final=final)
        return self.scan_emoji(text, final=final, preceding=preceding)

    # ------------------------------------------------------------------
    # Encode mode
    # ------------------------------------------------------------------

    def scan_aliases(self, text: str, *, final: bool = True) -> ScanResult:
        spans: list[Span] = []
        n = len(text)
        literal_start = 0
        i = 0
        while i < n:
            colon = text.find(":", i)
            if colon < 0:
                break
            decided, end, entry = self._match_alias(text, colon, final)
            if not decided:
                _flush_literal(spans, text, literal_start, colon)
                return ScanResult(spans, colon, text[colon:])
            if entry is None:
                # Only the opening colon degrades to literal text; the
                # next colon may still open a valid alias.
                i = colon + 1
                continue
            _flush_literal(spans, text, literal_start, colon)
            spans.append(Span(colon, end, SpanKind.ALIAS, text[colon:end], entry))
            literal_start = i = end

        _flush_literal(spans, text, literal_start, n)
        return ScanResult(spans, n)

    def _match_alias(self, text: str, colon: int, final: bool):
        """Try to read ``:name:`` starting at ``colon``.

        Returns ``(decided, end, entry)``; ``entry`` is None on a miss and
        ``decided`` is False when the answer depends on unseen text.
        """
        n = len(text)
        limit = colon + 1 + self.alias_window
        j = colon + 1
        while j < n and j <= limit:
            char = text[j]
            if char == ":":
                name = text[colon + 1 : j]
                entry = self.table.lookup_alias(name) if name else None
                return True, j + 1, entry
            if char not in ALIAS_CHARSET:
                return True, j, None
            j += 1
        if j > limit or final:
            return True, j, None
        return False, j, None

    # ------------------------------------------------------------------
    # Decode mode
    # ------------------------------------------------------------------

    def scan_emoji(self, text: str, *, final: bool = True, preceding: str = "") -> ScanResult:
        spans: list[Span] = []
        table = self.table
        n = len(text)
        literal_start = 0
        i = 0
        while i < n:
            char = text[i]
            if not table.is_lead(char) and not is_regional_indicator(char):
                i += 1
                continue

            joined = self._follows_joiner(text, i, preceding)
            decided, length, entry = self._match_sequence(text, i, final, after_zwj=joined)
            if not decided:
                _flush_literal(spans, text, literal_start, i)
                return ScanResult(spans, i, text[i:])
            if entry is not None:
                _flush_literal(spans, text, literal_start, i)
                end = i + length
                spans.append(Span(i, end, SpanKind.EMOJI, text[i:end], entry))
                literal_start = i = end
                continue

            # Unknown sequence: pass the whole of it through untouched
            end = self._sequence_end(text, i, final)
            if end is None:
                _flush_literal(spans, text, literal_start, i)
                return ScanResult(spans, i, text[i:])
            i = end

        _flush_literal(spans, text, literal_start, n)
        return ScanResult(spans, n)

    def _follows_joiner(self, text: str, i: int, preceding: str) -> bool:
        """Whether ``i`` sits right after a ZWJ that is attached to an emoji."""
        before = text[i - 2 : i] if i >= 2 else (preceding + text[:i])[-2:]
        if len(before) < 2 or before[1] != ZWJ:
            return False
        char = before[0]
        return self.table.is_lead(char) or is_extender(char) or is_regional_indicator(char) or is_pictographic(char)

    def _match_sequence(self, text: str, start: int, final: bool, after_zwj: bool = False):
        """Longest table sequence at ``start`` that ends on a sequence boundary.

        Returns ``(decided, length, entry)``; ``entry`` is None when
        nothing matches.
        """
        if after_zwj:
            return True, 0, None

        table = self.table
        n = len(text)
        available = n - start
        if not final and available < table.max_sequence_length and table.is_sequence_prefix(text[start:]):
            return False, 0, None

        for length in range(min(table.max_sequence_length, available), 0, -1):
            candidate = text[start : start + length]
            entry = table.lookup_sequence(candidate)
            if entry is None:
                continue
            end = start + length
            if end == n:
                if not final:
                    return False, 0, None
                return True, length, entry
            following = text[end]
            if is_extender(following):
                continue
            if length == 1 and is_regional_indicator(candidate) and is_regional_indicator(following):
                continue
            return True, length, entry

        return True, 0, None

    def _sequence_end(self, text: str, start: int, final: bool) -> int | None:
        """End offset of the emoji sequence starting at ``start``.

        Follows flag pairs, modifiers, variation selectors, keycaps, tags
        and ZWJ chains, up to the lookahead window. Returns None when the
        sequence may continue past the end of a partial buffer.
        """
        n = len(text)
        limit = start + self.sequence_window
        j = start + 1
        if is_regional_indicator(text[start]):
            if j >= n:
                return n if final else None
            if is_regional_indicator(text[j]):
                return j + 1

        while True:
            if j >= n:
                return n if final else None
            if j >= limit:
                logger.debug(f"Emoji sequence at offset {start} exceeds lookahead window, splitting")
                return j
            char = text[j]
            if char == ZWJ:
                j += 2
            elif is_extender(char):
                j += 1
            else:
                return j


def _flush_literal(spans: list[Span], text: str, start: int, end: int) -> None:
    if end > start:
        spans.append(Span(start, end, SpanKind.LITERAL, text[start:end]))
