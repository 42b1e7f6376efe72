"""
Tournament Lifecycle Guard

Any status may be written over any other; there is no transition table.
The one rule is that an ACTIVE tournament is frozen: its roster cannot change
and the tournament cannot be deleted.
"""

from typing import Any, TypeVar

from app.errors import InvalidParameterError, NotAllowedError
from app.models.tournament import TournamentStatus

T = TypeVar("T")


def parse_status(value: Any) -> TournamentStatus:
    """Map a raw status string onto TournamentStatus, rejecting anything else"""
    try:
        return TournamentStatus(value)
    except ValueError:
        raise InvalidParameterError("invalid status")


def check_mutable(tournament: Any) -> None:
    """
    Raise NotAllowedError if the tournament's structure may not change.

    Called before every player create/rename/delete and before deleting the
    tournament itself.
    """
    if tournament.status == TournamentStatus.ACTIVE:
        raise NotAllowedError("Tournament is active.")


def transition(tournament: T, new_status: TournamentStatus) -> T:
    """Overwrite the tournament's status. The target status is not checked against the current one."""
    tournament.status = new_status
    return tournament
