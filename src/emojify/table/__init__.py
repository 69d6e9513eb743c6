"""Alias table: the static mapping between alias names and emoji sequences.

Public API:
- AliasTable: immutable two-way index
- AliasEntry: one emoji with its aliases
- load_table(): build a table from a data file
- get_default_table(): the process-wide table built from embedded data
"""

from .types import AliasEntry, is_alias_char, is_valid_alias
from .alias_table import AliasTable
from .loader import build_table, get_default_table, load_records, load_table, parse_records

__all__ = [
    "AliasTable",
    "AliasEntry",
    "is_alias_char",
    "is_valid_alias",
    "build_table",
    "get_default_table",
    "load_records",
    "load_table",
    "parse_records",
]
