from datetime import timedelta

import pytest

from arenastats.analyser import (
    COMP_THRESHOLD,
    average_game_time,
    calculate_rating_change,
    most_common_team,
    put_games_into_buckets,
    start,
)
from arenastats.classes import PlayerClass
from arenastats.game import Game
from arenastats.game_bucket import GameBucket
from arenastats.team import Comp

TWOS_FRIENDLY = "WARRIOR-Arms-Alpha,PRIEST-Holy-Beta"
TWOS_OTHER_FRIENDLY = "MONK-Windwalker-Iota,DRUID-Restoration-Kappa"
TWOS_ENEMY = "MAGE-Frost-Gamma,ROGUE-Subtlety-Delta"
THREES_FRIENDLY = "WARRIOR-Arms-Alpha,PRIEST-Holy-Beta,MAGE-Fire-Epsilon"
THREES_ENEMY = "DRUID-Feral-Zeta,SHAMAN-Elemental-Eta,HUNTER-Marksmanship-Theta"


def make_game(count=4, friendly=TWOS_FRIENDLY, enemy=TWOS_ENEMY, duration=120,
              victory=True, rating=10, rated=True):
    return Game.from_record([
        "1600000000", "map", str(count), friendly, enemy, str(duration),
        "true" if victory else "false", "1", "1000", "500", "0", str(rating),
        "1500", "1490", "x", "true" if rated else "false",
    ])


def bucket_of(comp, size):
    bucket = GameBucket(comp)
    for _ in range(size):
        bucket.add(make_game())
    return bucket


def test_rating_change_split_by_bracket():
    games = [
        make_game(rating=10),
        make_game(count=6, friendly=THREES_FRIENDLY, enemy=THREES_ENEMY, rating=-5),
        make_game(rating=7),
    ]
    assert calculate_rating_change(games) == (17, -5)


def test_unrated_games_are_ignored():
    games = [make_game(rating=25, rated=False), make_game(rating=3)]
    assert calculate_rating_change(games) == (3, 0)


def test_incomplete_game_with_three_players_counts_as_threes():
    game = make_game(count=5, friendly=THREES_FRIENDLY, enemy="DRUID-Feral-Zeta,SHAMAN-Elemental-Eta",
                     rating=-8)
    assert calculate_rating_change([game]) == (0, -8)


def test_incomplete_game_with_two_players_counts_as_twos():
    game = make_game(count=3, friendly="WARRIOR-Arms-Alpha", rating=4)
    assert calculate_rating_change([game]) == (4, 0)


def test_buckets_below_threshold_are_pruned():
    games = [make_game() for _ in range(COMP_THRESHOLD)]
    games += [make_game(friendly=TWOS_OTHER_FRIENDLY) for _ in range(COMP_THRESHOLD - 1)]
    friendly, enemy = put_games_into_buckets(games)
    assert list(friendly) == [games[0].friendly_team.comp]
    assert len(friendly[games[0].friendly_team.comp]) == COMP_THRESHOLD
    assert len(enemy[games[0].enemy_team.comp]) == 2 * COMP_THRESHOLD - 1


def test_bucket_tracks_wins():
    games = [make_game(victory=i % 2 == 0) for i in range(COMP_THRESHOLD)]
    friendly, _ = put_games_into_buckets(games)
    bucket = friendly[games[0].friendly_team.comp]
    assert bucket.wins() + bucket.losses() == COMP_THRESHOLD
    assert bucket.wins() == bucket.losses()


def test_few_games_give_no_buckets():
    friendly, enemy = put_games_into_buckets([make_game()])
    assert friendly == {} and enemy == {}


def test_average_of_equal_durations():
    games = [make_game(duration=200) for _ in range(3)]
    assert average_game_time(games) == timedelta(seconds=200)


def test_average_lies_between_extremes():
    games = [make_game(duration=d) for d in (30, 400, 95)]
    average = average_game_time(games)
    assert timedelta(seconds=30) <= average <= timedelta(seconds=400)
    assert average * 3 == timedelta(seconds=30 + 400 + 95)


def test_average_of_bucket():
    bucket = GameBucket(Comp([PlayerClass.MAGE]))
    bucket.add(make_game(duration=60))
    bucket.add(make_game(duration=60))
    assert average_game_time(bucket) == timedelta(seconds=60)


def test_average_of_no_games_raises():
    with pytest.raises(ValueError):
        average_game_time([])


def test_most_common_team_sorted_and_truncated():
    mage = Comp([PlayerClass.MAGE])
    rogue = Comp([PlayerClass.ROGUE])
    monk = Comp([PlayerClass.MONK])
    buckets = {mage: bucket_of(mage, 2), rogue: bucket_of(rogue, 5), monk: bucket_of(monk, 3)}
    assert most_common_team(buckets, 2) == [(rogue, 5), (monk, 3)]


def test_most_common_team_with_large_count():
    mage = Comp([PlayerClass.MAGE])
    assert most_common_team({mage: bucket_of(mage, 1)}, 5) == [(mage, 1)]


def test_start_prints_common_comps(capsys):
    games = [make_game(victory=i % 3 == 0) for i in range(COMP_THRESHOLD)]
    assert start(games) is True
    out = capsys.readouterr().out
    assert out == f"{games[0].friendly_team.comp} - {COMP_THRESHOLD}\n"
    assert "Warrior" in out and "Priest" in out


def test_start_prints_nothing_below_threshold(capsys):
    assert start([make_game()]) is True
    assert capsys.readouterr().out == ""