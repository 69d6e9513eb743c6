"""Type definitions for the translation engine.

Provides:
- Direction: encode (aliases -> emoji) or decode (emoji -> aliases)
- SpanKind / Span: classified regions of scanned text
- ScanResult: spans plus the tail that must wait for more input
- PipelineState / PipelineMetrics: stream pipeline lifecycle and counters
"""

from dataclasses import dataclass
from enum import Enum

from ..table.types import AliasEntry


class Direction(Enum):
    """Translation direction."""

    ENCODE = "encode"
    DECODE = "decode"


class SpanKind(Enum):
    """Classification of a scanned region."""

    ALIAS = "alias"
    EMOJI = "emoji"
    LITERAL = "literal"


@dataclass(frozen=True)
class Span:
    """A contiguous region of scanned text.

    ``start`` and ``end`` are codepoint offsets into the scanned string.
    ``entry`` is set when the scanner already resolved the span.
    """

    start: int
    end: int
    kind: SpanKind
    payload: str
    entry: AliasEntry | None = None

    @property
    def is_match(self) -> bool:
        return self.kind is not SpanKind.LITERAL


@dataclass
class ScanResult:
    """Output of one scanner pass.

    ``spans`` cover ``text[:consumed]`` in order; ``pending`` is
    ``text[consumed:]``, held back because its classification depends on
    input that has not arrived yet. ``pending`` is empty on a final scan.
    """

    spans: list[Span]
    consumed: int
    pending: str = ""


class PipelineState(Enum):
    """State of a stream pipeline."""

    IDLE = "idle"
    READING = "reading"
    SCANNING = "scanning"
    EMITTING = "emitting"
    DRAINING = "draining"
    CLOSED = "closed"


@dataclass
class PipelineMetrics:
    """Counters for one stream pipeline."""

    direction: Direction
    state: PipelineState = PipelineState.IDLE

    chunks_read: int = 0
    bytes_in: int = 0
    bytes_out: int = 0
    spans_translated: int = 0
    max_carry_chars: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "direction": self.direction.value,
            "state": self.state.value,
            "chunks_read": self.chunks_read,
            "bytes_in": self.bytes_in,
            "bytes_out": self.bytes_out,
            "spans_translated": self.spans_translated,
            "max_carry_chars": self.max_carry_chars,
        }
