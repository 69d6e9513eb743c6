"""Unit tests for AliasEntry and AliasTable."""

import pytest

from emojify.exceptions import AmbiguousSequenceError, DuplicateAliasError, InvalidEntryError
from emojify.table import AliasEntry, AliasTable, is_alias_char, is_valid_alias

GRIN = "\U0001f601"
WAVE = "\U0001f44b"
TONE1 = "\U0001f3fb"
MAN = "\U0001f468"
ZWJ = "\u200d"
LAPTOP = "\U0001f4bb"


class TestAliasCharset:
    """Test the alias name charset."""

    @pytest.mark.parametrize("char", ["a", "Z", "0", "9", "_", "+", "-"])
    def test_allowed_chars(self, char):
        """Test characters allowed in alias names."""
        assert is_alias_char(char)

    @pytest.mark.parametrize("char", [":", " ", "@", ".", "(", "é"])
    def test_rejected_chars(self, char):
        """Test characters not allowed in alias names."""
        assert not is_alias_char(char)

    def test_valid_aliases(self):
        """Test valid alias names."""
        assert is_valid_alias("+1")
        assert is_valid_alias("-1")
        assert is_valid_alias("1st_place_medal")

    def test_empty_alias_invalid(self):
        """Test the empty alias name."""
        assert not is_valid_alias("")


class TestAliasEntry:
    """Test AliasEntry construction and invariants."""

    def test_from_aliases_uses_first_as_canonical(self):
        """Test the first alias becomes the canonical name."""
        entry = AliasEntry.from_aliases(["grin", "smile"], GRIN)
        assert entry.canonical_name == "grin"
        assert entry.aliases == ("grin", "smile")
        assert entry.alias_token == ":grin:"

    def test_codepoints(self):
        """Test codepoint formatting."""
        entry = AliasEntry.from_aliases(["wave_tone1"], WAVE + TONE1)
        assert entry.codepoints == (0x1F44B, 0x1F3FB)

    def test_empty_sequence_rejected(self):
        """Test an entry needs a sequence."""
        with pytest.raises(InvalidEntryError):
            AliasEntry.from_aliases(["nothing"], "")

    def test_no_aliases_rejected(self):
        """Test an entry needs an alias."""
        with pytest.raises(InvalidEntryError):
            AliasEntry.from_aliases([], GRIN)

    def test_canonical_must_be_an_alias(self):
        """Test the canonical name must be one of the aliases."""
        with pytest.raises(InvalidEntryError):
            AliasEntry(canonical_name="grin", aliases=("smile",), sequence=GRIN)

    def test_invalid_alias_rejected(self):
        """Test aliases outside the charset are rejected."""
        with pytest.raises(InvalidEntryError):
            AliasEntry.from_aliases(["big grin"], GRIN)

    def test_repeated_alias_rejected(self):
        """Test an alias listed twice in one entry."""
        with pytest.raises(InvalidEntryError):
            AliasEntry.from_aliases(["grin", "grin"], GRIN)

    def test_category_ignored_in_equality(self):
        """Test category does not affect equality."""
        first = AliasEntry.from_aliases(["grin"], GRIN, category="Smileys")
        second = AliasEntry.from_aliases(["grin"], GRIN)
        assert first == second


class TestAliasTableLookup:
    """Test AliasTable lookups in both directions."""

    def test_lookup_alias(self, small_table):
        """Test alias lookup."""
        assert small_table.lookup_alias("smile").sequence == GRIN
        assert small_table.lookup_alias("grin").sequence == GRIN

    def test_lookup_alias_miss(self, small_table):
        """Test lookup of an unknown alias."""
        assert small_table.lookup_alias("notareal") is None

    def test_lookup_alias_is_case_sensitive(self, small_table):
        """Test alias lookup is case sensitive."""
        assert small_table.lookup_alias("GRIN") is None

    def test_lookup_sequence_returns_canonical(self, small_table):
        """Test every alias of an entry decodes to the canonical one."""
        entry = small_table.lookup_sequence(GRIN)
        assert entry.canonical_name == "grin"

    def test_lookup_sequence_exact_only(self, small_table):
        """Test a modified sequence is a distinct key."""
        assert small_table.lookup_sequence(WAVE).canonical_name == "wave"
        assert small_table.lookup_sequence(WAVE + TONE1).canonical_name == "wave_tone1"
        assert small_table.lookup_sequence(WAVE + "\U0001f3fc") is None

    def test_contains(self, small_table):
        """Test membership by alias."""
        assert "rocket" in small_table
        assert "rocket_ship" not in small_table

    def test_len_and_iter(self, small_table):
        """Test iteration yields entries in data order."""
        entries = list(small_table)
        assert len(small_table) == len(entries) == 9
        assert entries[0].canonical_name == "grin"

    def test_indexes_are_read_only(self, small_table):
        """Test the indexes cannot be modified."""
        with pytest.raises(TypeError):
            small_table.by_alias["new"] = small_table.lookup_alias("grin")

    def test_repr(self, small_table):
        """Test the table repr."""
        assert repr(small_table) == "AliasTable(entries=9, aliases=10)"


class TestAliasTableBounds:
    """Test derived lengths and prefix queries used by the scanner."""

    def test_max_alias_length(self, small_table):
        """Test longest alias length."""
        assert small_table.max_alias_length == len("man_technologist")

    def test_max_sequence_length(self, small_table):
        """Test longest sequence length."""
        assert small_table.max_sequence_length == 3

    def test_is_lead(self, small_table):
        """Test first codepoints of sequences are leads."""
        assert small_table.is_lead(MAN)
        assert small_table.is_lead("1")
        assert not small_table.is_lead(LAPTOP)

    def test_is_sequence_prefix(self, small_table):
        """Test only proper prefixes count."""
        assert small_table.is_sequence_prefix(MAN)
        assert small_table.is_sequence_prefix(MAN + ZWJ)
        assert not small_table.is_sequence_prefix(MAN + ZWJ + LAPTOP)
        assert not small_table.is_sequence_prefix(GRIN)

    def test_has_ascii_sequence(self, small_table):
        """Test detection of sequences made only of ASCII."""
        assert small_table.has_ascii_sequence is False
        table = AliasTable([AliasEntry.from_aliases(["one_plain"], "1")])
        assert table.has_ascii_sequence is True

    def test_empty_table(self):
        """Test a table with no entries."""
        table = AliasTable([])
        assert len(table) == 0
        assert table.max_alias_length == 0
        assert table.max_sequence_length == 0
        assert table.listing() == []


class TestAliasTableConflicts:
    """Test construction errors."""

    def test_duplicate_alias(self):
        """Test two entries cannot share an alias."""
        with pytest.raises(DuplicateAliasError) as exc_info:
            AliasTable(
                [
                    AliasEntry.from_aliases(["grin"], GRIN),
                    AliasEntry.from_aliases(["grin"], WAVE),
                ]
            )
        assert exc_info.value.alias == "grin"

    def test_ambiguous_sequence(self):
        """Test a shared sequence without precedence is rejected."""
        with pytest.raises(AmbiguousSequenceError) as exc_info:
            AliasTable(
                [
                    AliasEntry.from_aliases(["grin"], GRIN),
                    AliasEntry.from_aliases(["smile"], GRIN),
                ]
            )
        assert exc_info.value.names == ["grin", "smile"]
        assert "U+1F601" in str(exc_info.value)

    def test_precedence_resolves_shared_sequence(self):
        """Test precedence picks the decoding entry; both still encode."""
        table = AliasTable(
            [
                AliasEntry.from_aliases(["grin"], GRIN),
                AliasEntry.from_aliases(["smile"], GRIN),
            ],
            precedence={GRIN: "smile"},
        )
        assert table.lookup_sequence(GRIN).canonical_name == "smile"
        assert table.lookup_alias("grin").sequence == GRIN

    def test_precedence_must_name_a_claimant(self):
        """Test precedence naming an alias of another sequence."""
        with pytest.raises(AmbiguousSequenceError):
            AliasTable(
                [
                    AliasEntry.from_aliases(["grin"], GRIN),
                    AliasEntry.from_aliases(["smile"], GRIN),
                ],
                precedence={GRIN: "wave"},
            )


class TestAliasTableListing:
    """Test enumeration."""

    def test_aliases_sorted(self, small_table):
        """Test aliases() is sorted."""
        aliases = small_table.aliases()
        assert aliases == sorted(aliases)
        assert "smile" in aliases

    def test_listing_format(self, small_table):
        """Test the ":alias: emoji" listing lines."""
        listing = small_table.listing()
        assert listing == sorted(listing)
        assert f":grin: {GRIN}" in listing
        assert f":smile: {GRIN}" in listing
        assert len(listing) == len(small_table.by_alias)
