"""Regenerate the alias data file from GitHub's gemoji database.

Fetches ``db/emoji.json``, validates every entry, checks that the result
builds a consistent AliasTable and writes it in the embedded data format.
"""

import json
from collections.abc import Iterable
from pathlib import Path

import aiohttp
from pydantic import TypeAdapter, ValidationError

from ..core.logging import get_logger
from ..exceptions import DataFileError
from ..schemas.records import EmojiRecord, GemojiRecord
from .loader import build_table

logger = get_logger(__name__)

GEMOJI_URL = "https://raw.githubusercontent.com/github/gemoji/master/db/emoji.json"

_GEMOJI_ADAPTER = TypeAdapter(list[GemojiRecord])


async def fetch_gemoji(
    session: aiohttp.ClientSession,
    url: str = GEMOJI_URL,
    timeout_s: float = 30.0,
) -> list[EmojiRecord]:
    """Download and validate the gemoji database.

    Raises:
        DataFileError: On HTTP errors or an invalid payload

    """
    try:
        async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout_s)) as response:
            if response.status != 200:
                raise DataFileError(f"Unexpected status {response.status} fetching {url}")
            raw = await response.read()
    except (aiohttp.ClientError, TimeoutError) as e:
        raise DataFileError(f"Failed to fetch emoji data from {url}: {e}", cause=e) from e

    try:
        entries = _GEMOJI_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise DataFileError(f"Invalid gemoji data from {url}: {e.error_count()} error(s)", cause=e) from e

    logger.info(f"Fetched {len(entries)} gemoji entries from {url}")
    return [record for entry in entries for record in entry.to_records()]


def render_data_file(records: Iterable[EmojiRecord]) -> str:
    """Serialize records in the embedded data layout, one record per line."""
    lines = []
    for record in records:
        item = {"codepoints": record.codepoints, "aliases": list(record.aliases)}
        if record.category:
            item["category"] = record.category
        lines.append("  " + json.dumps(item, ensure_ascii=False))
    if not lines:
        return "[]\n"
    return "[\n" + ",\n".join(lines) + "\n]\n"


async def update_data_file(path: str | Path, url: str = GEMOJI_URL) -> int:
    """Fetch gemoji data and write it to ``path``.

    The data is checked with build_table() first, so a file that would
    not load is never written.

    Returns:
        Number of records written

    """
    async with aiohttp.ClientSession() as session:
        records = await fetch_gemoji(session, url)

    table = build_table(records)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(render_data_file(records), encoding="utf-8")
    tmp_path.replace(path)

    logger.info(f"Wrote {len(records)} records ({len(table.by_alias)} aliases) to {path}")
    return len(records)
