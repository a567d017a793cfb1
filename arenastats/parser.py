"""Reading arena games from a semicolon separated log file."""

from __future__ import annotations

import csv
import logging
import os
from typing import Union

from arenastats.game import Game, GameType

log = logging.getLogger(__name__)

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class ParseError(Exception):
    """The log file is not well-formed delimited data."""


def parse_games(file_path: PathLike) -> list[Game]:
    """Read all complete 2v2 and 3v3 games from a log file.

    The first row is a header. Games in which a player is missing are
    logged and left out.
    """
    games: list[Game] = []
    with open(os.fspath(file_path), newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle, delimiter=";")
        try:
            header = next(reader, None)
            if header is None:
                return games
            for record in reader:
                if not record:
                    continue
                if len(record) != len(header):
                    raise ParseError(
                        f"line {reader.line_num}: found record with {len(record)} fields, "
                        f"but the header has {len(header)} fields"
                    )
                log.debug("Record: %r", record)
                game = Game.from_record(record)
                log.debug("Game: %r", game)
                if game.game_type is GameType.OTHER:
                    _log_player_missing(game)
                else:
                    games.append(game)
        except csv.Error as err:
            raise ParseError(f"line {reader.line_num}: {err}") from err
    log.debug("Total games: %d", len(games))
    return games


def _log_player_missing(game: Game) -> None:
    if len(game.friendly_team.players) < len(game.enemy_team.players):
        log.warning(
            "Someone on your team left the game, player(s) found in the game: %r, "
            "game has been deleted",
            game.friendly_team.players,
        )
    else:
        log.warning(
            "Someone on the enemy team left, player(s) found in the game: %r, "
            "game has been deleted",
            game.enemy_team.players,
        )