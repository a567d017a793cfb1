"""Parsing of individual fields of an arena log record."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from arenastats.classes import PlayerClass
from arenastats.player import Player, Realm
from arenastats.team import Team

log = logging.getLogger(__name__)


def parse_timestamp(text: str) -> datetime:
    """Parse a Unix timestamp in seconds into an aware UTC datetime."""
    try:
        seconds = int(text)
    except ValueError:
        raise ValueError(f"failed to parse timestamp: {text!r}") from None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _parse_mmr(text: str, side: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"failed to parse {side} team mmr: {text!r}") from None


def parse_teams(
    friendly_team: str,
    enemy_team: str,
    friendly_team_mmr: str,
    enemy_team_mmr: str,
) -> tuple[Team, Team]:
    """Build the friendly and enemy teams from their raw fields."""
    friendly = Team(parse_players(friendly_team), _parse_mmr(friendly_team_mmr, "friendly"))
    enemy = Team(parse_players(enemy_team), _parse_mmr(enemy_team_mmr, "enemy"))
    return friendly, enemy


def parse_players(team_string: str) -> list[Player]:
    """Parse a comma separated list of players."""
    players = [parse_player(part) for part in team_string.split(",")]
    log.debug("Found players: %r", players)
    return players


def parse_player(player_string: str) -> Player:
    """Parse ``CLASS-Spec-Name[-Realm]`` into a player."""
    parts = player_string.split("-")
    if len(parts) < 3:
        raise ValueError(f"malformed player entry: {player_string!r}")
    class_token, spec, name = parts[:3]
    realm = Realm.DRAENOR if len(parts) > 3 else None
    return Player(
        name=name,
        realm=realm,
        player_class=PlayerClass.parse(class_token),
        spec=spec,
    )