"""
Qualifying Ranker

Orders players by best recorded time (lower is better) using standard
competition ranking: tied times share a position and the next distinct time
is placed at 1 + the number of players strictly ahead of it.

    times [10, 10, 20]  ->  positions [1, 1, 3]

Players without a time never reach the ranker.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List


@dataclass(frozen=True)
class QualifyingRow:
    """A player's best qualifying run, as read from storage."""
    player_id: int
    player_name: str
    signup_date: datetime
    best_time: int


@dataclass(frozen=True)
class QualifyingPlayer:
    player_id: int
    name: str
    position: int
    signup_date: datetime
    time: int


def rank_qualifying(rows: Iterable[QualifyingRow]) -> List[QualifyingPlayer]:
    # player_id keeps the order of tied players stable between calls
    ordered = sorted(rows, key=lambda r: (r.best_time, r.player_id))

    ranked: List[QualifyingPlayer] = []
    position = 0
    previous_time = None
    for index, row in enumerate(ordered):
        if row.best_time != previous_time:
            position = index + 1
            previous_time = row.best_time
        ranked.append(
            QualifyingPlayer(
                player_id=row.player_id,
                name=row.player_name,
                position=position,
                signup_date=row.signup_date,
                time=row.best_time,
            )
        )
    return ranked
