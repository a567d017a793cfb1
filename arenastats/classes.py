"""Playable character classes."""

from __future__ import annotations

from enum import Enum


class PlayerClass(Enum):
    """A character class, valued by its display name."""

    WARRIOR = "Warrior"
    HUNTER = "Hunter"
    PALADIN = "Paladin"
    PRIEST = "Priest"
    ROGUE = "Rogue"
    SHAMAN = "Shaman"
    WARLOCK = "Warlock"
    MAGE = "Mage"
    MONK = "Monk"
    DRUID = "Druid"
    DEMON_HUNTER = "Demon Hunter"
    DEATH_KNIGHT = "Death Knight"

    def __str__(self) -> str:
        return self.value

    @property
    def identifier(self) -> str:
        """Compact name without spaces, e.g. ``DemonHunter``."""
        return self.value.replace(" ", "")

    @property
    def ordinal(self) -> int:
        """Position of the class in declaration order."""
        return _ORDER[self]

    @classmethod
    def parse(cls, text: str) -> PlayerClass:
        """Parse an upper-case log token such as ``DEMONHUNTER``."""
        try:
            return _TOKENS[text]
        except KeyError:
            raise ValueError(f"unknown class: {text!r}") from None


_ORDER = {member: index for index, member in enumerate(PlayerClass)}
_TOKENS = {member.name.replace("_", ""): member for member in PlayerClass}