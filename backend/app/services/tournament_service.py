"""
Tournament Service - the operations the HTTP layer calls.

Each operation loads what it needs, applies the lifecycle guard or the
bracket validator/builder, and hands the write to a repository. Errors from
the guard, the validator and the repositories propagate unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Any, List

from sqlmodel import Session

from app.errors import InvalidParameterError
from app.models.player import Player
from app.models.qualifying import QualifyingTime
from app.models.tournament import Tournament, TournamentStatus
from app.repositories import PlayerRepository, QualifyingRepository, TournamentRepository
from app.services.bracket_builder import build_tournament
from app.services.bracket_validator import TournamentSpec
from app.services.qualifying_ranker import QualifyingPlayer, rank_qualifying
from app.services.status_machine import check_mutable, parse_status, transition

logger = logging.getLogger(__name__)


@dataclass
class Qualifying:
    tournament_id: int
    players: List[QualifyingPlayer]


class TournamentService:
    def __init__(self, session: Session):
        self.tournaments = TournamentRepository(session)
        self.players = PlayerRepository(session)
        self.qualifying = QualifyingRepository(session)

    # ------------------------------------------------------------------
    # Tournaments
    # ------------------------------------------------------------------

    def create_tournament(self, spec: TournamentSpec) -> Tournament:
        draft = build_tournament(spec)
        tournament = self.tournaments.insert(draft)
        logger.info(
            "Created tournament %d '%s' with %d rounds", tournament.id, tournament.name, len(draft.rounds)
        )
        return tournament

    def get_tournament(self, tournament_id: int) -> Tournament:
        return self.tournaments.find_by_id(tournament_id)

    def list_tournaments(self) -> List[Tournament]:
        return self.tournaments.find_all()

    def change_status(self, tournament_id: int, status: Any) -> Tournament:
        new_status = parse_status(status)
        tournament = self.tournaments.find_by_id(tournament_id)
        old_status = TournamentStatus(tournament.status)
        tournament = self.tournaments.save_status(transition(tournament, new_status))
        logger.info("Tournament %d status %s -> %s", tournament_id, old_status.value, new_status.value)
        return tournament

    def delete_tournament(self, tournament_id: int) -> None:
        tournament = self.tournaments.find_by_id(tournament_id)
        check_mutable(tournament)
        self.tournaments.delete(tournament_id)

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def list_players(self, tournament_id: int) -> List[Player]:
        self.tournaments.find_by_id(tournament_id)
        return self.players.list_by_tournament(tournament_id)

    def get_player(self, tournament_id: int, player_id: int) -> Player:
        self.tournaments.find_by_id(tournament_id)
        return self.players.find_by_id(tournament_id, player_id)

    def add_player(self, tournament_id: int, name: str) -> Player:
        check_mutable(self.tournaments.find_by_id(tournament_id))
        player = self.players.insert(tournament_id, name)
        logger.info("Added player %d to tournament %d", player.id, tournament_id)
        return player

    def rename_player(self, tournament_id: int, player_id: int, name: str) -> Player:
        check_mutable(self.tournaments.find_by_id(tournament_id))
        player = self.players.find_by_id(tournament_id, player_id)
        return self.players.rename(player, name)

    def remove_player(self, tournament_id: int, player_id: int) -> None:
        check_mutable(self.tournaments.find_by_id(tournament_id))
        self.players.delete(tournament_id, player_id)
        logger.info("Removed player %d from tournament %d", player_id, tournament_id)

    # ------------------------------------------------------------------
    # Qualifying
    # ------------------------------------------------------------------

    def get_qualifying(self, tournament_id: int) -> Qualifying:
        self.tournaments.find_by_id(tournament_id)
        rows = self.qualifying.best_times(tournament_id)
        return Qualifying(tournament_id=tournament_id, players=rank_qualifying(rows))

    def record_qualifying_time(self, tournament_id: int, player_id: int, time: int) -> QualifyingTime:
        self.tournaments.find_by_id(tournament_id)
        self.players.find_by_id(tournament_id, player_id)
        if time < 0:
            raise InvalidParameterError("Qualifying time cannot be negative")
        return self.qualifying.insert(tournament_id, player_id, time)

    def clear_qualifying(self, tournament_id: int) -> None:
        self.tournaments.find_by_id(tournament_id)
        removed = self.qualifying.delete_by_tournament(tournament_id)
        logger.info("Cleared %d qualifying times for tournament %d", removed, tournament_id)
