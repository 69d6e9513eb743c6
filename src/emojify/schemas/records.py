from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmojiRecord(BaseModel):
    """One record of the embedded alias data file.

    ``codepoints`` is a space separated list of hex codepoints, e.g.
    ``"1F44D 1F3FB"``. The first alias is the canonical one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    codepoints: str
    aliases: list[str] = Field(min_length=1)
    category: str | None = None
    description: str | None = None

    @field_validator("codepoints")
    @classmethod
    def _check_codepoints(cls, value: str) -> str:
        tokens = value.split()
        if not tokens:
            raise ValueError("codepoints must not be empty")
        normalized = []
        for token in tokens:
            try:
                codepoint = int(token, 16)
            except ValueError:
                raise ValueError(f"not a hex codepoint: {token!r}") from None
            if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
                raise ValueError(f"not a Unicode scalar value: {token!r}")
            normalized.append(f"{codepoint:04X}")
        return " ".join(normalized)

    @property
    def sequence(self) -> str:
        return "".join(chr(int(token, 16)) for token in self.codepoints.split())

    @classmethod
    def from_sequence(
        cls,
        sequence: str,
        aliases: list[str],
        category: str | None = None,
        description: str | None = None,
    ) -> EmojiRecord:
        codepoints = " ".join(f"{ord(ch):04X}" for ch in sequence)
        return cls(codepoints=codepoints, aliases=aliases, category=category, description=description)


SKIN_TONES = ("\U0001f3fb", "\U0001f3fc", "\U0001f3fd", "\U0001f3fe", "\U0001f3ff")
_VS16 = "\ufe0f"
_ZWJ = "\u200d"


def skin_tone_variant(emoji: str, modifier: str) -> str:
    """Apply a skin tone modifier to a base emoji.

    The first VS16 is dropped and the modifier goes right before the
    first ZWJ, or at the end when the emoji has no ZWJ.
    """
    base = emoji.replace(_VS16, "", 1)
    index = base.find(_ZWJ)
    if index < 0:
        return base + modifier
    return base[:index] + modifier + base[index:]


class GemojiRecord(BaseModel):
    """One entry of GitHub's gemoji ``db/emoji.json``.

    gemoji lists only the base form of emoji that take skin tones and
    marks them with ``skin_tones``; to_records() expands those into the
    five ``<alias>_toneN`` records.
    """

    model_config = ConfigDict(extra="allow")

    emoji: str = Field(min_length=1)
    aliases: list[str] = Field(min_length=1)
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    skin_tones: bool = False

    def to_records(self) -> list[EmojiRecord]:
        records = [
            EmojiRecord.from_sequence(
                self.emoji,
                list(self.aliases),
                category=self.category,
                description=self.description,
            )
        ]
        if not self.skin_tones:
            return records

        for number, modifier in enumerate(SKIN_TONES, start=1):
            records.append(
                EmojiRecord.from_sequence(
                    skin_tone_variant(self.emoji, modifier),
                    [f"{alias}_tone{number}" for alias in self.aliases],
                    category=self.category,
                    description=self.description,
                )
            )
        return records
