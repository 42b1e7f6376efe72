"""
Bracket Spec Validator

Checks a submitted chain of rounds before anything is built or stored.

Rules, applied round by round in submitted order:
- Unless underfilled groups are allowed, the first round must seat exactly the
  tournament's declared player count, and every later round must seat exactly
  the players advancing out of the previous round
  (previous.player_advancement_count * previous.group_count).
- Every round needs group_size > 0 and group_count > 0.
- 0 <= player_advancement_count <= group_size.

The first violation aborts validation; errors are not accumulated.
"""

import logging
from dataclasses import dataclass, field
from typing import List, NoReturn, Optional, Sequence

from app.errors import InvalidParameterError

logger = logging.getLogger(__name__)

FIRST_ROUND_MISMATCH = "Number of players in first round must be equal to total players in tournament"
ROUND_MISMATCH = "Number of players in round must be equal to total advancing players of previous round"
GROUP_SIZE_NOT_POSITIVE = "Group size must be greater than 0"
GROUP_COUNT_NOT_POSITIVE = "Group count must be greater than 0"
ADVANCEMENT_EXCEEDS_GROUP = "Player advancement count cannot exceed total players in group"
ADVANCEMENT_NEGATIVE = "Player advancement count cannot be negative"


@dataclass(frozen=True)
class RoundSpec:
    """One round as submitted by the organiser."""
    name: str
    match_count: int
    player_advancement_count: int
    group_size: int
    group_count: int
    concurrent_group_count: int = 1

    @property
    def players_in_round(self) -> int:
        return self.group_count * self.group_size

    @property
    def advancing_players(self) -> int:
        return self.player_advancement_count * self.group_count


@dataclass(frozen=True)
class TournamentSpec:
    """Canonical input for creating a tournament."""
    name: str
    description: str
    start_date: str
    end_date: str
    player_count: int
    allow_underfilled_groups: bool = False
    rounds: List[RoundSpec] = field(default_factory=list)


def validate_round_chain(
    player_count: int,
    allow_underfilled_groups: bool,
    rounds: Sequence[RoundSpec],
) -> List[RoundSpec]:
    """
    Validate the round chain against itself and the declared player count.

    Args:
        player_count: Total entrants declared for the tournament
        allow_underfilled_groups: Skip the seat-count conservation checks
        rounds: Round specs in play order

    Returns:
        The same rounds, as a list, once every rule holds

    Raises:
        InvalidParameterError: On the first rule a round breaks
    """
    previous: Optional[RoundSpec] = None

    for index, round_spec in enumerate(rounds):
        if not allow_underfilled_groups:
            players_in_round = round_spec.players_in_round
            if previous is None:
                if players_in_round != player_count:
                    _reject(index, FIRST_ROUND_MISMATCH)
            elif players_in_round != previous.advancing_players:
                _reject(index, ROUND_MISMATCH)

        if round_spec.group_size <= 0:
            _reject(index, GROUP_SIZE_NOT_POSITIVE)

        if round_spec.group_count <= 0:
            _reject(index, GROUP_COUNT_NOT_POSITIVE)

        if round_spec.player_advancement_count > round_spec.group_size:
            _reject(index, ADVANCEMENT_EXCEEDS_GROUP)

        if round_spec.player_advancement_count < 0:
            _reject(index, ADVANCEMENT_NEGATIVE)

        previous = round_spec

    logger.debug(
        "Round chain valid: %d rounds, player_count=%d, underfill=%s",
        len(rounds),
        player_count,
        allow_underfilled_groups,
    )
    return list(rounds)


def validate_spec(spec: TournamentSpec) -> TournamentSpec:
    """Validate a full tournament spec; returns it unchanged when valid."""
    validate_round_chain(spec.player_count, spec.allow_underfilled_groups, spec.rounds)
    return spec


def _reject(index: int, message: str) -> NoReturn:
    logger.info("Rejected round chain at round %d: %s", index + 1, message)
    raise InvalidParameterError(message)
