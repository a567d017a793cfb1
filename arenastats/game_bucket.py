"""Groups of games that share a team composition."""

from __future__ import annotations

import logging
from typing import Dict

from arenastats.game import Game
from arenastats.team import Comp

log = logging.getLogger(__name__)


class GameBucket:
    """Games played with or against one composition, with win tracking."""

    def __init__(self, comp: Comp) -> None:
        self.comp = comp
        self.games: list[Game] = []
        self._wins = 0
        self._winrate = 0.0
        self._stale = False

    def add(self, game: Game) -> None:
        """Add a game to the bucket."""
        self.games.append(game)
        if game.victory:
            self._wins += 1
        self._stale = True

    def wins(self) -> int:
        """Number of games won."""
        return self._wins

    def losses(self) -> int:
        """Number of games lost."""
        return len(self.games) - self._wins

    def __len__(self) -> int:
        return len(self.games)

    def __iter__(self):
        return iter(self.games)

    def is_empty(self) -> bool:
        """True if the bucket holds no games."""
        return not self.games

    def winrate(self) -> float:
        """Fraction of games won, from 0.0 to 1.0."""
        if self._stale:
            self._winrate = self._wins / len(self.games)
            log.debug(
                "Games won: %d, Games lost: %d, winrate: %.2f",
                self._wins,
                self.losses(),
                self._winrate,
            )
            self._stale = False
        return self._winrate


GameBuckets = Dict[Comp, GameBucket]