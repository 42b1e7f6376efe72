"""
Bracket Builder - turns a validated TournamentSpec into the in-memory
tournament aggregate that the repository persists.

No I/O happens here. Groups are allocated as empty lists: seeding players
into groups is a separate concern that does not exist yet.
"""

from dataclasses import dataclass, field
from typing import List

from app.models.tournament import TournamentStatus
from app.services.bracket_validator import RoundSpec, TournamentSpec, validate_spec


@dataclass
class GroupDraft:
    # Never produced by build_round yet; group seeding will fill RoundDraft.groups
    name: str


@dataclass
class RoundDraft:
    position: int
    name: str
    match_count: int
    player_count: int
    player_advancement_count: int
    group_size: int
    group_count: int
    concurrent_group_count: int
    groups: List[GroupDraft] = field(default_factory=list)


@dataclass
class TournamentDraft:
    name: str
    description: str
    start_date: str
    end_date: str
    player_count: int
    allow_underfilled_groups: bool
    status: TournamentStatus = TournamentStatus.DRAFT
    rounds: List[RoundDraft] = field(default_factory=list)


def build_round(position: int, spec: RoundSpec) -> RoundDraft:
    return RoundDraft(
        position=position,
        name=spec.name,
        match_count=spec.match_count,
        player_count=spec.players_in_round,
        player_advancement_count=spec.player_advancement_count,
        group_size=spec.group_size,
        group_count=spec.group_count,
        concurrent_group_count=spec.concurrent_group_count,
        groups=[],
    )


def build_tournament(spec: TournamentSpec) -> TournamentDraft:
    """
    Build the tournament aggregate for a TournamentSpec.

    The round chain is validated first, so an InvalidParameterError escapes before
    anything is built. The result always starts in DRAFT status.
    """
    validate_spec(spec)

    return TournamentDraft(
        name=spec.name,
        description=spec.description,
        start_date=spec.start_date,
        end_date=spec.end_date,
        player_count=spec.player_count,
        allow_underfilled_groups=spec.allow_underfilled_groups,
        status=TournamentStatus.DRAFT,
        rounds=[build_round(position, round_spec) for position, round_spec in enumerate(spec.rounds)],
    )
