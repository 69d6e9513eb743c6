"""Translation engine.

Scans text for alias tokens or emoji sequences and filters byte streams
chunk by chunk without ever splitting a match across chunk boundaries.

Public API:
- encode / decode: blocking stream filters
- encode_async / decode_async: asyncio stream filters
- encode_text / decode_text: whole-string helpers
- StreamPipeline: the push-style pipeline behind all of the above
"""

from .api import (
    decode,
    decode_async,
    decode_text,
    encode,
    encode_async,
    encode_text,
    has_emoji,
    list_emojis,
    translate_text,
)
from .config import PipelineConfig
from .pipeline import StreamPipeline
from .scanner import Scanner
from .translator import Translator
from .types import Direction, PipelineMetrics, PipelineState, ScanResult, Span, SpanKind

__all__ = [
    # Stream filters
    "encode",
    "decode",
    "encode_async",
    "decode_async",
    # Text helpers
    "encode_text",
    "decode_text",
    "translate_text",
    "has_emoji",
    "list_emojis",
    # Components
    "StreamPipeline",
    "PipelineConfig",
    "Scanner",
    "Translator",
    # Types
    "Direction",
    "SpanKind",
    "Span",
    "ScanResult",
    "PipelineState",
    "PipelineMetrics",
]
