"""Players taking part in an arena match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from arenastats.classes import PlayerClass


class Realm(Enum):
    """Realm a player comes from."""

    DRAENOR = "Draenor"


@dataclass(frozen=True)
class Player:
    """A single arena participant."""

    name: str
    realm: Realm | None
    player_class: PlayerClass
    spec: str