from typing import List

from sqlalchemy import delete, func
from sqlmodel import Session, select

from app.errors import NotFoundError
from app.models.player import Player
from app.models.qualifying import QualifyingTime
from app.services.qualifying_ranker import QualifyingRow


class QualifyingRepository:
    def __init__(self, session: Session):
        self.session = session

    def best_times(self, tournament_id: int) -> List[QualifyingRow]:
        """
        One row per player that has recorded at least one time.

        best_time is the player's lowest time; signup_date is when the
        player's first time was recorded.
        """
        query = (
            select(
                QualifyingTime.player_id,
                Player.name,
                func.min(QualifyingTime.created_at),
                func.min(QualifyingTime.time),
            )
            .join(Player, Player.id == QualifyingTime.player_id)
            .where(QualifyingTime.tournament_id == tournament_id)
            .group_by(QualifyingTime.player_id, Player.name)
        )
        return [
            QualifyingRow(player_id=player_id, player_name=name, signup_date=signup_date, best_time=best_time)
            for player_id, name, signup_date, best_time in self.session.exec(query).all()
        ]

    def insert(self, tournament_id: int, player_id: int, time: int) -> QualifyingTime:
        entry = QualifyingTime(tournament_id=tournament_id, player_id=player_id, time=time)
        try:
            self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(entry)
        return entry

    def delete_by_tournament(self, tournament_id: int) -> int:
        try:
            result = self.session.execute(delete(QualifyingTime).where(QualifyingTime.tournament_id == tournament_id))
            if result.rowcount == 0:
                raise NotFoundError("qualifying not found")
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount
