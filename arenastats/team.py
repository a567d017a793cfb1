"""Teams and team compositions."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable

from arenastats.classes import PlayerClass
from arenastats.player import Player


@total_ordering
class Comp:
    """The classes a team is made of, in the order they were listed."""

    __slots__ = ("team_classes",)

    def __init__(self, team_classes: Iterable[PlayerClass] = ()) -> None:
        self.team_classes: tuple[PlayerClass, ...] = tuple(team_classes)

    @classmethod
    def from_players(cls, players: Iterable[Player]) -> Comp:
        """Build the composition of a list of players."""
        return cls(player.player_class for player in players)

    def add_class(self, player_class: PlayerClass) -> None:
        """Append a class to the composition."""
        self.team_classes = self.team_classes + (player_class,)

    def size(self) -> int:
        """Number of classes in the composition."""
        return len(self.team_classes)

    def _key(self) -> tuple[int, tuple[int, ...]]:
        return self.size(), tuple(c.ordinal for c in self.team_classes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comp):
            return NotImplemented
        return self.team_classes == other.team_classes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Comp):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self.team_classes)

    def __iter__(self):
        return iter(self.team_classes)

    def __len__(self) -> int:
        return len(self.team_classes)

    def __str__(self) -> str:
        return "[" + ", ".join(c.identifier for c in self.team_classes) + "]"

    def __repr__(self) -> str:
        return f"Comp({list(self.team_classes)!r})"


@dataclass
class Team:
    """One side of an arena match."""

    players: list[Player]
    mmr: int
    comp: Comp = field(init=False)

    def __post_init__(self) -> None:
        self.comp = Comp.from_players(self.players)