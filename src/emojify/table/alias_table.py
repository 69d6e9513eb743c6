"""Bidirectional alias table.

AliasTable indexes a set of AliasEntry objects two ways:
- by_alias: alias name (no colons) -> entry, for encoding
- by_sequence: exact codepoint sequence -> entry, for decoding

Both indexes are built eagerly and are read-only afterwards, so one table
can be shared by any number of concurrent pipelines without locking.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..exceptions import AmbiguousSequenceError, DuplicateAliasError
from .types import AliasEntry

logger = logging.getLogger(__name__)


class AliasTable:
    """Immutable alias <-> emoji sequence mapping.

    Example:
        table = AliasTable([
            AliasEntry.from_aliases(["grin", "smile"], "\\U0001F601"),
        ])
        table.lookup_alias("smile").sequence   # "😁"
        table.lookup_sequence("😁").canonical_name   # "grin"

    """

    def __init__(self, entries: Iterable[AliasEntry], precedence: Mapping[str, str] | None = None):
        """Build both indexes.

        Args:
            entries: Entries in data order
            precedence: Optional mapping of sequence -> canonical name that
                decides which entry decodes a sequence claimed by several

        Raises:
            DuplicateAliasError: If two entries claim the same alias
            AmbiguousSequenceError: If two entries claim one sequence and
                no precedence rule resolves it

        """
        precedence = dict(precedence or {})
        self._entries: tuple[AliasEntry, ...] = tuple(entries)

        by_alias: dict[str, AliasEntry] = {}
        claims: dict[str, list[AliasEntry]] = {}
        for entry in self._entries:
            for alias in entry.aliases:
                existing = by_alias.get(alias)
                if existing is not None:
                    raise DuplicateAliasError(alias, existing.canonical_name, entry.canonical_name)
                by_alias[alias] = entry
            claims.setdefault(entry.sequence, []).append(entry)

        by_sequence: dict[str, AliasEntry] = {}
        for sequence, claimants in claims.items():
            if len(claimants) == 1:
                by_sequence[sequence] = claimants[0]
                continue
            names = [entry.canonical_name for entry in claimants]
            preferred = precedence.get(sequence)
            winner = next((entry for entry in claimants if entry.canonical_name == preferred), None)
            if winner is None:
                raise AmbiguousSequenceError(sequence, names)
            logger.debug(f"Sequence claimed by {names}, decoding as {winner.canonical_name!r}")
            by_sequence[sequence] = winner

        self.by_alias: Mapping[str, AliasEntry] = MappingProxyType(by_alias)
        self.by_sequence: Mapping[str, AliasEntry] = MappingProxyType(by_sequence)

        self._max_alias_length = max((len(alias) for alias in by_alias), default=0)
        self._max_sequence_length = max((len(sequence) for sequence in by_sequence), default=0)
        self._leads = frozenset(sequence[0] for sequence in by_sequence)
        self._prefixes = frozenset(
            sequence[:cut] for sequence in by_sequence for cut in range(1, len(sequence))
        )
        self._has_ascii_sequence = any(sequence.isascii() for sequence in by_sequence)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AliasEntry]:
        return iter(self._entries)

    def __contains__(self, alias: object) -> bool:
        return alias in self.by_alias

    def __repr__(self) -> str:
        return f"AliasTable(entries={len(self._entries)}, aliases={len(self.by_alias)})"

    @property
    def max_alias_length(self) -> int:
        """Length of the longest alias name, without colons."""
        return self._max_alias_length

    @property
    def max_sequence_length(self) -> int:
        """Length in codepoints of the longest emoji sequence."""
        return self._max_sequence_length

    @property
    def has_ascii_sequence(self) -> bool:
        return self._has_ascii_sequence

    def lookup_alias(self, name: str) -> AliasEntry | None:
        """Find the entry for an alias name given without colons."""
        return self.by_alias.get(name)

    def lookup_sequence(self, sequence: str) -> AliasEntry | None:
        """Find the entry whose exact sequence is ``sequence``."""
        return self.by_sequence.get(sequence)

    def is_lead(self, char: str) -> bool:
        """Whether some sequence starts with ``char``."""
        return char in self._leads

    def is_sequence_prefix(self, text: str) -> bool:
        """Whether ``text`` is a proper prefix of some sequence."""
        return text in self._prefixes

    def aliases(self) -> list[str]:
        return sorted(self.by_alias)

    def listing(self) -> list[str]:
        """Every alias as ``":alias: emoji"``, sorted."""
        return sorted(f":{alias}: {entry.sequence}" for alias, entry in self.by_alias.items())
