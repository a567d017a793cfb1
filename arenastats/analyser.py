"""Statistics over a collection of arena games."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable, Mapping, Sequence

from arenastats.game import Game, GameType
from arenastats.game_bucket import GameBucket, GameBuckets
from arenastats.team import Comp

log = logging.getLogger(__name__)

COMP_THRESHOLD = 20


def start(games: Sequence[Game]) -> bool:
    """Run the analysis and print the most played friendly compositions."""
    friendly_comps, enemy_comps = put_games_into_buckets(games)
    calculate_rating_change(games)
    average_game_time(games)
    log.debug("%d, %d", len(friendly_comps), len(enemy_comps))
    for comp, bucket in enemy_comps.items():
        duration = average_game_time(bucket)
        seconds = int(duration.total_seconds())
        log.debug(
            "Comp: %-25s - Average Duration: %d Minutes, %d Seconds - PlayCount: %d, Winrate: %.2f",
            comp,
            seconds // 60,
            seconds % 60,
            len(bucket),
            bucket.winrate(),
        )

    for comp, playcount in most_common_team(friendly_comps, 5):
        print(f"{comp} - {playcount}")
    return True


def put_games_into_buckets(games: Iterable[Game]) -> tuple[GameBuckets, GameBuckets]:
    """Group games by friendly and by enemy composition.

    Compositions seen fewer than ``COMP_THRESHOLD`` times are dropped.
    """
    friendly: GameBuckets = {}
    enemy: GameBuckets = {}
    for game in games:
        for buckets, comp in (
            (friendly, game.friendly_team.comp),
            (enemy, game.enemy_team.comp),
        ):
            bucket = buckets.get(comp)
            if bucket is None:
                bucket = buckets[comp] = GameBucket(comp)
            bucket.add(game)
    log.debug("total comps before prune: %d", len(friendly) + len(enemy))

    friendly = {comp: b for comp, b in friendly.items() if len(b) >= COMP_THRESHOLD}
    enemy = {comp: b for comp, b in enemy.items() if len(b) >= COMP_THRESHOLD}

    if log.isEnabledFor(logging.DEBUG):
        log.debug("Printing all the unique comps!")
        for comp in (*friendly, *enemy):
            log.debug("%r", comp)
        log.debug("total comps after prune: %d", len(friendly) + len(enemy))
        log.debug("Done printing unique comps!")
    return friendly, enemy


def calculate_rating_change(games: Iterable[Game]) -> tuple[int, int]:
    """Sum the rating change of rated games as ``(2v2, 3v3)``."""
    twos = 0
    threes = 0
    for game in games:
        if not game.is_rated:
            continue
        log.debug("rating change: %d", game.rating_change)
        if game.game_type is GameType.TWOS:
            twos += game.rating_change
        elif game.game_type is GameType.THREES:
            threes += game.rating_change
        else:
            log.warning(
                "A game that is missing is included in the calculations, "
                "maybe have a look into this!"
            )
            if len(game.friendly_team.players) == 3 or len(game.enemy_team.players) == 3:
                threes += game.rating_change
            else:
                twos += game.rating_change
    log.debug("2v2: %d, 3v3: %d", twos, threes)
    return twos, threes


def average_game_time(games: Iterable[Game]) -> timedelta:
    """Mean duration of the given games; raises ``ValueError`` if there are none."""
    durations = [game.duration for game in games]
    if not durations:
        raise ValueError("cannot average the duration of zero games")
    average = sum(durations, timedelta()) / len(durations)
    seconds = int(average.total_seconds())
    log.debug("%d minutes, %d seconds", seconds // 60, seconds % 60)
    return average


def most_common_team(game_buckets: Mapping[Comp, GameBucket], count: int) -> list[tuple[Comp, int]]:
    """The ``count`` compositions with the most games, most played first."""
    ranked = sorted(
        ((comp, len(bucket)) for comp, bucket in game_buckets.items()),
        key=lambda item: item[1],
        reverse=True,
    )
    return ranked[:count]