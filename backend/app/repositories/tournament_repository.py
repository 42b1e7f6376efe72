import logging
from typing import List

from sqlalchemy import delete, or_
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from app.errors import NotFoundError
from app.models.group import Group
from app.models.match import Match
from app.models.placement import Placement
from app.models.player import Player
from app.models.player_group_link import PlayerGroupLink
from app.models.qualifying import QualifyingTime
from app.models.round import Round
from app.models.tournament import Tournament
from app.services.bracket_builder import TournamentDraft

logger = logging.getLogger(__name__)

TOURNAMENT_NOT_FOUND = "Tournament not found"


class TournamentRepository:
    """Tournament rows plus the rounds and groups hanging off them."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, tournament_id: int) -> Tournament:
        tournament = self.session.get(Tournament, tournament_id)
        if not tournament:
            raise NotFoundError(TOURNAMENT_NOT_FOUND)
        return tournament

    def find_all(self) -> List[Tournament]:
        return list(self.session.exec(select(Tournament).order_by(Tournament.id)).all())

    def insert(self, draft: TournamentDraft) -> Tournament:
        """
        Persist a built tournament with all of its rounds and groups.

        Everything is written in one transaction: either the tournament and
        every round commit together or nothing is stored.
        """
        try:
            tournament = Tournament(
                name=draft.name,
                description=draft.description,
                start_date=draft.start_date,
                end_date=draft.end_date,
                status=draft.status,
                allow_underfilled_groups=draft.allow_underfilled_groups,
                player_count=draft.player_count,
            )
            self.session.add(tournament)
            self.session.flush()  # Get the ID

            for round_draft in draft.rounds:
                round_row = Round(
                    tournament_id=tournament.id,
                    position=round_draft.position,
                    name=round_draft.name,
                    match_count=round_draft.match_count,
                    player_count=round_draft.player_count,
                    player_advancement_count=round_draft.player_advancement_count,
                    group_size=round_draft.group_size,
                    group_count=round_draft.group_count,
                    concurrent_group_count=round_draft.concurrent_group_count,
                )
                self.session.add(round_row)
                self.session.flush()

                for group_draft in round_draft.groups:
                    self.session.add(Group(round_id=round_row.id, name=group_draft.name))

            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(tournament)
        return tournament

    def save_status(self, tournament: Tournament) -> Tournament:
        """Write the tournament's current status; a row deleted in the meantime is reported as not found."""
        try:
            self.session.add(tournament)
            self.session.commit()
        except StaleDataError:
            self.session.rollback()
            raise NotFoundError(TOURNAMENT_NOT_FOUND)
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(tournament)
        return tournament

    def delete(self, tournament_id: int) -> None:
        """Delete a tournament and every row that belongs to it, in one transaction."""
        round_ids = select(Round.id).where(Round.tournament_id == tournament_id)
        group_ids = select(Group.id).where(Group.round_id.in_(round_ids))
        match_ids = select(Match.id).where(Match.group_id.in_(group_ids))
        player_ids = select(Player.id).where(Player.tournament_id == tournament_id)

        # Order matters: children before parents
        child_deletes = [
            delete(Placement).where(or_(Placement.match_id.in_(match_ids), Placement.player_id.in_(player_ids))),
            delete(PlayerGroupLink).where(
                or_(PlayerGroupLink.group_id.in_(group_ids), PlayerGroupLink.player_id.in_(player_ids))
            ),
            delete(Match).where(Match.group_id.in_(group_ids)),
            delete(Group).where(Group.round_id.in_(round_ids)),
            delete(Round).where(Round.tournament_id == tournament_id),
            delete(QualifyingTime).where(QualifyingTime.tournament_id == tournament_id),
            delete(Player).where(Player.tournament_id == tournament_id),
        ]

        try:
            for statement in child_deletes:
                self.session.execute(statement.execution_options(synchronize_session="fetch"))

            result = self.session.execute(delete(Tournament).where(Tournament.id == tournament_id))
            if result.rowcount == 0:
                raise NotFoundError(TOURNAMENT_NOT_FOUND)

            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info("Deleted tournament %d", tournament_id)
