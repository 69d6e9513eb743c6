"""Public translation entry points.

encode/decode filter one byte stream into another; the ``_text``
variants translate a whole string in memory; list_emojis enumerates the
table. Every function uses the process-wide default table unless one is
passed in.
"""

from dataclasses import replace

from ..table.alias_table import AliasTable
from ..table.loader import get_default_table
from .config import PipelineConfig
from .pipeline import StreamPipeline
from .scanner import Scanner
from .translator import Translator
from .types import Direction


def _pipeline(direction: Direction, table: AliasTable | None, chunk_size: int | None) -> StreamPipeline:
    if table is None:
        table = get_default_table()
    config = PipelineConfig.from_config()
    if chunk_size is not None:
        config = replace(config, chunk_size=chunk_size)
    return StreamPipeline(table, direction, config)


def encode(reader, writer, *, table: AliasTable | None = None, chunk_size: int | None = None) -> int:
    """Replace every ``:alias:`` read from ``reader`` with its emoji.

    Args:
        reader: Open binary stream to read from
        writer: Open binary stream to write to
        table: Alias table (the default table when None)
        chunk_size: Bytes per read (configured value when None)

    Returns:
        Number of bytes written

    Raises:
        IOFailure: If the reader or writer fails

    """
    return _pipeline(Direction.ENCODE, table, chunk_size).run(reader, writer)


def decode(reader, writer, *, table: AliasTable | None = None, chunk_size: int | None = None) -> int:
    """Replace every known emoji read from ``reader`` with its canonical ``:alias:``."""
    return _pipeline(Direction.DECODE, table, chunk_size).run(reader, writer)


async def encode_async(reader, writer, *, table: AliasTable | None = None, chunk_size: int | None = None) -> int:
    """asyncio counterpart of encode()."""
    return await _pipeline(Direction.ENCODE, table, chunk_size).run_async(reader, writer)


async def decode_async(reader, writer, *, table: AliasTable | None = None, chunk_size: int | None = None) -> int:
    """asyncio counterpart of decode()."""
    return await _pipeline(Direction.DECODE, table, chunk_size).run_async(reader, writer)


def translate_text(text: str, direction: Direction, table: AliasTable | None = None) -> str:
    if table is None:
        table = get_default_table()
    # Nothing to translate
    if direction is Direction.ENCODE and ":" not in text:
        return text
    if direction is Direction.DECODE and text.isascii() and not table.has_ascii_sequence:
        return text
    result = Scanner(table).scan(text, direction)
    return Translator(table).render(result.spans, direction)


def encode_text(text: str, table: AliasTable | None = None) -> str:
    """Encode a complete string, e.g. ``"Hello :wave:"`` -> ``"Hello 👋"``."""
    return translate_text(text, Direction.ENCODE, table)


def decode_text(text: str, table: AliasTable | None = None) -> str:
    """Decode a complete string, e.g. ``"Hello 👋"`` -> ``"Hello :wave:"``."""
    return translate_text(text, Direction.DECODE, table)


def has_emoji(text: str, table: AliasTable | None = None) -> bool:
    """Whether ``text`` contains at least one emoji from the table."""
    if table is None:
        table = get_default_table()
    if text.isascii() and not table.has_ascii_sequence:
        return False
    result = Scanner(table).scan(text, Direction.DECODE)
    return any(span.is_match for span in result.spans)


def list_emojis(table: AliasTable | None = None) -> list[str]:
    """Every alias as ``":alias: emoji"``, sorted by alias."""
    if table is None:
        table = get_default_table()
    return table.listing()
