from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict, Field

from app.auth import require_user
from app.dependencies import get_tournament_service
from app.models.tournament import TournamentStatus
from app.services.bracket_validator import RoundSpec, TournamentSpec
from app.services.tournament_service import TournamentService

router = APIRouter(dependencies=[Depends(require_user)])


# ============================================================================
# Request/Response Models
# ============================================================================


class RoundCreate(BaseModel):
    name: str = Field(min_length=3, max_length=255)
    match_count: int = Field(ge=1)
    player_advancement_count: int = Field(ge=0)
    group_size: int = Field(ge=2)
    group_count: int = Field(ge=1)
    concurrent_group_count: int = Field(ge=1)

    def to_spec(self) -> RoundSpec:
        return RoundSpec(
            name=self.name,
            match_count=self.match_count,
            player_advancement_count=self.player_advancement_count,
            group_size=self.group_size,
            group_count=self.group_count,
            concurrent_group_count=self.concurrent_group_count,
        )


class TournamentCreate(BaseModel):
    name: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=3, max_length=255)
    # Opaque strings; only emptiness is checked
    start_date: str = Field(min_length=1)
    end_date: str = Field(min_length=1)
    allow_underfilled_groups: bool = False
    player_count: int = Field(ge=1)
    rounds: List[RoundCreate] = Field(default_factory=list)

    def to_spec(self) -> TournamentSpec:
        return TournamentSpec(
            name=self.name,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            player_count=self.player_count,
            allow_underfilled_groups=self.allow_underfilled_groups,
            rounds=[r.to_spec() for r in self.rounds],
        )


class TournamentStatusUpdate(BaseModel):
    # Plain string: unknown values are rejected by the service as "invalid status"
    status: str


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RoundResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    position: int
    name: str
    match_count: int
    player_count: int
    player_advancement_count: int
    group_size: int
    group_count: int
    concurrent_group_count: int
    groups: List[GroupResponse] = []


class TournamentPlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class TournamentSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    start_date: str
    end_date: str
    status: TournamentStatus


class TournamentResponse(TournamentSummaryResponse):
    player_count: int
    allow_underfilled_groups: bool
    created_at: datetime
    updated_at: datetime
    rounds: List[RoundResponse] = []
    players: List[TournamentPlayerResponse] = []


# ============================================================================
# Tournament Endpoints
# ============================================================================


@router.get("/tournaments", response_model=List[TournamentSummaryResponse])
def list_tournaments(service: TournamentService = Depends(get_tournament_service)):
    """List all tournaments"""
    return [TournamentSummaryResponse.model_validate(t) for t in service.list_tournaments()]


@router.post("/tournaments", response_model=TournamentResponse, status_code=201)
def create_tournament(
    tournament_data: TournamentCreate, service: TournamentService = Depends(get_tournament_service)
):
    """
    Create a tournament with its rounds.

    The round chain is validated before anything is stored. The tournament
    always starts in DRAFT, and every round starts with no groups filled.
    """
    tournament = service.create_tournament(tournament_data.to_spec())
    return TournamentResponse.model_validate(tournament)


@router.get("/tournaments/{tournament_id}", response_model=TournamentResponse)
def get_tournament(tournament_id: int, service: TournamentService = Depends(get_tournament_service)):
    """Get a tournament with its rounds and players"""
    return TournamentResponse.model_validate(service.get_tournament(tournament_id))


@router.patch("/tournaments/{tournament_id}/status", response_model=TournamentResponse)
def update_tournament_status(
    tournament_id: int,
    status_data: TournamentStatusUpdate,
    service: TournamentService = Depends(get_tournament_service),
):
    """Set the tournament status. Any status may follow any other."""
    tournament = service.change_status(tournament_id, status_data.status)
    return TournamentResponse.model_validate(tournament)


@router.delete("/tournaments/{tournament_id}", status_code=204)
def delete_tournament(tournament_id: int, service: TournamentService = Depends(get_tournament_service)):
    """Delete a tournament and everything in it. Not allowed while the tournament is ACTIVE."""
    service.delete_tournament(tournament_id)
    return Response(status_code=204)
