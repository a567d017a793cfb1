"""Arena games built from log records."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Sequence

from arenastats.records import parse_teams, parse_timestamp
from arenastats.team import Comp, Team

_FIELD_COUNT = 16


class GameMap(Enum):
    """Arena map; individual maps are not distinguished."""

    ALL_MAPS = "all maps"


class GameType(Enum):
    """Bracket of a game, derived from its player count."""

    TWOS = "GameType: [2v2]"
    THREES = "GameType: [3v3]"
    OTHER = "Yikes, someone left this game"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_player_count(cls, player_count: int) -> GameType:
        """Map the total number of players to a bracket."""
        if player_count == 4:
            return cls.TWOS
        if player_count == 6:
            return cls.THREES
        return cls.OTHER


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"failed to parse {what}: {text!r}") from None


@dataclass
class Game:
    """One arena game as recorded in the log."""

    timestamp: datetime
    map: GameMap
    game_type: GameType
    friendly_team: Team
    enemy_team: Team
    duration: timedelta
    victory: bool
    killing_blows: int
    damage: int
    healing: int
    honor: int
    rating_change: int
    is_rated: bool

    @classmethod
    def from_record(cls, record: Sequence[str]) -> Game:
        """Build a game from the fields of one semicolon separated log row."""
        if len(record) < _FIELD_COUNT:
            raise ValueError(
                f"record has {len(record)} fields, expected at least {_FIELD_COUNT}"
            )
        friendly_team, enemy_team = parse_teams(record[3], record[4], record[12], record[13])
        try:
            player_count = int(record[2])
        except ValueError:
            print(f"Error: Invalid player count in record: {list(record)!r}", file=sys.stderr)
            player_count = 0
        return cls(
            timestamp=parse_timestamp(record[0]),
            map=GameMap.ALL_MAPS,
            game_type=GameType.from_player_count(player_count),
            friendly_team=friendly_team,
            enemy_team=enemy_team,
            duration=timedelta(seconds=_parse_int(record[5], "game duration")),
            victory=record[6] == "true",
            killing_blows=_parse_int(record[7], "killing blows"),
            damage=_parse_int(record[8], "damage"),
            healing=_parse_int(record[9], "healing"),
            honor=_parse_int(record[10], "honor"),
            rating_change=_parse_int(record[11], "rating change"),
            is_rated=record[15] == "true",
        )


def print_all_comps(comps: Iterable[Comp]) -> None:
    """Print each composition's classes on a line of its own."""
    for comp in comps:
        print(" ".join(c.identifier for c in comp.team_classes))