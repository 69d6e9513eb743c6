"""Alias data loading.

Reads the embedded alias data (or an alternate file named by the
configuration), validates it with pydantic and builds the process-wide
AliasTable once.
"""

import threading
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..core.config import get_config
from ..core.logging import get_logger
from ..exceptions import DataFileError
from ..schemas.records import EmojiRecord
from .alias_table import AliasTable
from .types import AliasEntry

logger = get_logger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[EmojiRecord])

_DEFAULT_TABLE_LOCK = threading.Lock()
_default_table: AliasTable | None = None


def embedded_data_path():
    """Location of the alias data shipped with the package."""
    return resources.files("emojify.table").joinpath("data/emoji.json")


def parse_records(raw: bytes | str, source: str = "<memory>") -> list[EmojiRecord]:
    """Validate raw JSON alias data.

    Raises:
        DataFileError: If the payload is not a valid list of records

    """
    try:
        return _RECORDS_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise DataFileError(f"Invalid alias data in {source}: {e.error_count()} error(s)", cause=e) from e


def load_records(path: str | Path | None = None) -> list[EmojiRecord]:
    """Read and validate alias records from ``path`` or the embedded file."""
    source = embedded_data_path() if path is None else Path(path)
    try:
        raw = source.read_bytes()
    except OSError as e:
        raise DataFileError(f"Cannot read alias data from {source}", cause=e) from e
    return parse_records(raw, source=str(source))


def build_table(records: Iterable[EmojiRecord], precedence: Mapping[str, str] | None = None) -> AliasTable:
    entries = [AliasEntry.from_aliases(record.aliases, record.sequence, record.category) for record in records]
    return AliasTable(entries, precedence=precedence)


def load_table(path: str | Path | None = None, precedence: Mapping[str, str] | None = None) -> AliasTable:
    """Load records and build a table.

    Args:
        path: Alternate data file; the embedded one when None
        precedence: Optional sequence -> canonical name tie-breakers

    Returns:
        A fully validated AliasTable

    Raises:
        DataFileError: If the data cannot be read or validated
        DuplicateAliasError, AmbiguousSequenceError, InvalidEntryError:
            If the records violate the table invariants

    """
    records = load_records(path)
    table = build_table(records, precedence=precedence)
    logger.info(
        f"Alias table loaded from {path or 'embedded data'}: "
        f"{len(table)} emoji, {len(table.by_alias)} aliases"
    )
    return table


def get_default_table() -> AliasTable:
    """Get the process-wide alias table, building it on first use."""
    global _default_table
    if _default_table is None:
        with _DEFAULT_TABLE_LOCK:
            if _default_table is None:
                _default_table = load_table(get_config().data_file)
    return _default_table
