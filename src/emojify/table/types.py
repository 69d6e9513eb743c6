"""Type definitions for the alias table.

Provides:
- AliasEntry: one emoji with its aliases and exact codepoint sequence
- is_alias_char / is_valid_alias: the alias name charset
"""

from dataclasses import dataclass, field

from ..exceptions import InvalidEntryError

ALIAS_CHARSET = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_+-")


def is_alias_char(char: str) -> bool:
    """Whether ``char`` may appear between the colons of an alias."""
    return char in ALIAS_CHARSET


def is_valid_alias(name: str) -> bool:
    return bool(name) and all(ch in ALIAS_CHARSET for ch in name)


@dataclass(frozen=True)
class AliasEntry:
    """An emoji and every alias that names it.

    ``aliases`` keeps data order; membership is what matters, but the
    order decides which alias is canonical when built via
    ``from_aliases``. ``sequence`` is the exact codepoint sequence,
    including any variation selector, skin-tone modifier or ZWJ.
    """

    canonical_name: str
    aliases: tuple[str, ...]
    sequence: str
    category: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.sequence:
            raise InvalidEntryError(f"Entry {self.canonical_name!r} has an empty sequence")
        if self.canonical_name not in self.aliases:
            raise InvalidEntryError(
                f"Canonical name {self.canonical_name!r} is not one of its aliases {list(self.aliases)}"
            )
        for alias in self.aliases:
            if not is_valid_alias(alias):
                raise InvalidEntryError(f"Invalid alias {alias!r} for entry {self.canonical_name!r}")
        if len(set(self.aliases)) != len(self.aliases):
            raise InvalidEntryError(f"Entry {self.canonical_name!r} repeats an alias")

    @classmethod
    def from_aliases(cls, aliases, sequence: str, category: str | None = None) -> "AliasEntry":
        """Build an entry whose canonical name is the first alias."""
        aliases = tuple(aliases)
        if not aliases:
            raise InvalidEntryError(f"Sequence {sequence!r} has no aliases")
        return cls(canonical_name=aliases[0], aliases=aliases, sequence=sequence, category=category)

    @property
    def codepoints(self) -> tuple[int, ...]:
        return tuple(ord(ch) for ch in self.sequence)

    @property
    def alias_token(self) -> str:
        """The canonical alias wrapped in colons, as emitted on decode."""
        return f":{self.canonical_name}:"
