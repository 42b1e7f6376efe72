from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict

from app.auth import require_user
from app.dependencies import get_tournament_service
from app.services.tournament_service import TournamentService

router = APIRouter(dependencies=[Depends(require_user)])


class QualifyingTimeCreate(BaseModel):
    player_id: int
    time: int


class QualifyingTimeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    tournament_id: int
    player_id: int
    time: int
    created_at: datetime


class QualifyingPlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    player_id: int
    name: str
    position: int
    signup_date: datetime
    time: int


class QualifyingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    tournament_id: int
    players: List[QualifyingPlayerResponse]


@router.get("/tournaments/{tournament_id}/qualifying", response_model=QualifyingResponse)
def get_qualifying(tournament_id: int, service: TournamentService = Depends(get_tournament_service)):
    """
    Qualifying leaderboard: each player's best time, ranked ascending.

    Tied times share a position; the next position skips accordingly
    (10, 10, 20 -> 1, 1, 3). Players without a time are not listed.
    """
    return QualifyingResponse.model_validate(service.get_qualifying(tournament_id))


@router.post("/tournaments/{tournament_id}/qualifying", response_model=QualifyingTimeResponse, status_code=201)
def record_qualifying_time(
    tournament_id: int,
    request: QualifyingTimeCreate,
    service: TournamentService = Depends(get_tournament_service),
):
    """Record one qualifying run for a player of this tournament"""
    entry = service.record_qualifying_time(tournament_id, request.player_id, request.time)
    return QualifyingTimeResponse.model_validate(entry)


@router.delete("/tournaments/{tournament_id}/qualifying", status_code=204)
def clear_qualifying(tournament_id: int, service: TournamentService = Depends(get_tournament_service)):
    """Remove every recorded qualifying time of the tournament"""
    service.clear_qualifying(tournament_id)
    return Response(status_code=204)
