"""
Player (roster) API Routes

Create, rename and delete are refused while the tournament is ACTIVE.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict, Field

from app.auth import require_user
from app.dependencies import get_tournament_service
from app.services.tournament_service import TournamentService

router = APIRouter(dependencies=[Depends(require_user)])


# ============================================================================
# Request/Response Models
# ============================================================================


class PlayerCreateRequest(BaseModel):
    name: str = Field(min_length=3, max_length=255)


class PlayerUpdateRequest(BaseModel):
    name: str = Field(min_length=3, max_length=255)


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    tournament_id: int
    name: str
    created_at: datetime


# ============================================================================
# Player CRUD Endpoints
# ============================================================================


@router.get("/tournaments/{tournament_id}/players", response_model=List[PlayerResponse])
def list_players(tournament_id: int, service: TournamentService = Depends(get_tournament_service)):
    """Get all players of a tournament, in signup order"""
    return [PlayerResponse.model_validate(p) for p in service.list_players(tournament_id)]


@router.get("/tournaments/{tournament_id}/players/{player_id}", response_model=PlayerResponse)
def get_player(tournament_id: int, player_id: int, service: TournamentService = Depends(get_tournament_service)):
    return PlayerResponse.model_validate(service.get_player(tournament_id, player_id))


@router.post("/tournaments/{tournament_id}/players", response_model=PlayerResponse, status_code=201)
def create_player(
    tournament_id: int,
    request: PlayerCreateRequest,
    service: TournamentService = Depends(get_tournament_service),
):
    return PlayerResponse.model_validate(service.add_player(tournament_id, request.name))


@router.patch("/tournaments/{tournament_id}/players/{player_id}", response_model=PlayerResponse)
def update_player(
    tournament_id: int,
    player_id: int,
    request: PlayerUpdateRequest,
    service: TournamentService = Depends(get_tournament_service),
):
    """Rename a player"""
    return PlayerResponse.model_validate(service.rename_player(tournament_id, player_id, request.name))


@router.delete("/tournaments/{tournament_id}/players/{player_id}", status_code=204)
def delete_player(tournament_id: int, player_id: int, service: TournamentService = Depends(get_tournament_service)):
    """Delete a player together with their qualifying times"""
    service.remove_player(tournament_id, player_id)
    return Response(status_code=204)
