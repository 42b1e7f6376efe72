import logging
from typing import List

from sqlalchemy import delete
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from app.errors import NotFoundError
from app.models.placement import Placement
from app.models.player import Player
from app.models.player_group_link import PlayerGroupLink
from app.models.qualifying import QualifyingTime

logger = logging.getLogger(__name__)

PLAYER_NOT_FOUND = "Player not found"


class PlayerRepository:
    """Players of a tournament. Every lookup is scoped to the owning tournament."""

    def __init__(self, session: Session):
        self.session = session

    def list_by_tournament(self, tournament_id: int) -> List[Player]:
        query = select(Player).where(Player.tournament_id == tournament_id).order_by(Player.id)
        return list(self.session.exec(query).all())

    def find_by_id(self, tournament_id: int, player_id: int) -> Player:
        player = self.session.get(Player, player_id)
        if not player or player.tournament_id != tournament_id:
            raise NotFoundError(PLAYER_NOT_FOUND)
        return player

    def insert(self, tournament_id: int, name: str) -> Player:
        player = Player(tournament_id=tournament_id, name=name)
        try:
            self.session.add(player)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(player)
        return player

    def rename(self, player: Player, name: str) -> Player:
        player.name = name
        try:
            self.session.add(player)
            self.session.commit()
        except StaleDataError:
            self.session.rollback()
            raise NotFoundError(PLAYER_NOT_FOUND)
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(player)
        return player

    def delete(self, tournament_id: int, player_id: int) -> None:
        """Delete a player with its qualifying times, placements and group memberships."""
        try:
            for statement in (
                delete(QualifyingTime).where(QualifyingTime.player_id == player_id),
                delete(Placement).where(Placement.player_id == player_id),
                delete(PlayerGroupLink).where(PlayerGroupLink.player_id == player_id),
            ):
                self.session.execute(statement)

            result = self.session.execute(
                delete(Player).where(Player.id == player_id, Player.tournament_id == tournament_id)
            )
            if result.rowcount == 0:
                raise NotFoundError(PLAYER_NOT_FOUND)

            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
