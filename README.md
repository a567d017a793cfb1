# arenastats

Reads an exported arena match history and prints the team compositions you
played most often.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
arenastats matches.csv
```

The command prints up to five lines of the form

```
[Warrior, DemonHunter] - 42
```

These are the friendly team compositions with the most games, most played
first. A composition counts only if it was seen in at least 20 games
(`arenastats.analyser.COMP_THRESHOLD`).

If no file is given, or the file cannot be opened, or it is not well-formed
delimited data (`arenastats.parser.ParseError`), the command prints the error
and exits with status 1. A field that does not hold the expected number, or a
player entry that cannot be read, raises `ValueError`. So does a file that
holds no complete 2v2 or 3v3 game, because the average game time of zero
games cannot be taken.

## Input format

The file is separated by semicolons and starts with a header row. Every
following row must have as many fields as the header and at least 16. Blank
rows are skipped. The fields used are, counting from 0:

| Field | Meaning |
|-------|---------|
| 0  | Unix timestamp in seconds |
| 2  | total player count |
| 3  | friendly team players |
| 4  | enemy team players |
| 5  | duration in seconds |
| 6  | victory (`true` means won) |
| 7  | killing blows |
| 8  | damage |
| 9  | healing |
| 10 | honor |
| 11 | rating change |
| 12 | friendly team MMR |
| 13 | enemy team MMR |
| 15 | rated (`true` means rated) |

A team's players are separated by commas. A player is written as
`CLASS-Spec-Name` or `CLASS-Spec-Name-Realm`, with the class as an upper-case
token such as `WARRIOR`, `DEMONHUNTER` or `DEATHKNIGHT`.

A player count of 4 is a 2v2 game and 6 a 3v3 game. Rows with any other count
(someone left the game) are dropped, with a warning logged. A player count
that is not a number is reported on standard error and the row is dropped as
well.

## Library use

```python
from arenastats.parser import parse_games
from arenastats.analyser import (
    average_game_time,
    calculate_rating_change,
    most_common_team,
    put_games_into_buckets,
)

games = parse_games("matches.csv")
twos, threes = calculate_rating_change(games)   # summed over rated games
friendly, enemy = put_games_into_buckets(games)  # dicts of Comp -> GameBucket
for comp, count in most_common_team(friendly, 5):
    print(comp, count)
print(average_game_time(games))                  # a datetime.timedelta
```

- `arenastats.game.Game` holds one game; `Game.from_record` builds it from the
  fields of one row.
- `arenastats.team.Team` holds a side's players and MMR; its `comp` is an
  `arenastats.team.Comp`, the classes of the team in the order listed.
- `arenastats.game_bucket.GameBucket` holds the games played with or against
  one `Comp`, with `wins()`, `losses()` and `winrate()` (a fraction from 0.0
  to 1.0).
- `arenastats.analyser.start` runs the whole analysis and prints what the
  command prints.

The package logs through the standard `logging` module under the `arenastats`
logger. The command silences it.

## What it does not do

- The command prints only the most played compositions. Rating change totals,
  average game times and win rates per enemy composition are computed, but
  they are only written to the debug log.
- Maps are not told apart: every game has `GameMap.ALL_MAPS`.
- Realms are not told apart: any player entry with a fourth part gets
  `Realm.DRAENOR`, whatever the part says.
- Nothing is stored; the file is read afresh on every run.