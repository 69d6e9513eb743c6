"""Shared pytest fixtures for emojify tests."""

import os

# Keep test runs off the user's log directory and config file
os.environ["EMOJIFY_FILE_LOGS"] = "0"
os.environ["EMOJIFY_CONFIG"] = os.devnull
os.environ.pop("EMOJIFY_DATA_FILE", None)
os.environ.pop("EMOJIFY_CHUNK_SIZE", None)

import pytest  # noqa: E402

from emojify.table import AliasEntry, AliasTable, get_default_table  # noqa: E402

GRIN = "\U0001f601"
WAVE = "\U0001f44b"
TONE1 = "\U0001f3fb"
TONE2 = "\U0001f3fc"
ROCKET = "\U0001f680"
HEART = "\u2764\ufe0f"
MAN = "\U0001f468"
LAPTOP = "\U0001f4bb"
ZWJ = "\u200d"
FLAG_US = "\U0001f1fa\U0001f1f8"
KEYCAP_ONE = "1\ufe0f\u20e3"


@pytest.fixture
def small_table():
    """A hand-built table covering each kind of sequence."""
    return AliasTable(
        [
            AliasEntry.from_aliases(["grin", "smile"], GRIN),
            AliasEntry.from_aliases(["wave"], WAVE),
            AliasEntry.from_aliases(["wave_tone1"], WAVE + TONE1),
            AliasEntry.from_aliases(["rocket"], ROCKET),
            AliasEntry.from_aliases(["heart"], HEART),
            AliasEntry.from_aliases(["man"], MAN),
            AliasEntry.from_aliases(["man_technologist"], MAN + ZWJ + LAPTOP),
            AliasEntry.from_aliases(["us"], FLAG_US),
            AliasEntry.from_aliases(["one"], KEYCAP_ONE),
        ]
    )


@pytest.fixture(scope="session")
def default_table():
    """The embedded table, built once per session."""
    return get_default_table()
