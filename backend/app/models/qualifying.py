from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class QualifyingTime(SQLModel, table=True):
    """One recorded qualifying run. Lower time is better; a player's best run counts."""

    __tablename__ = "qualifying"

    id: Optional[int] = Field(default=None, primary_key=True)
    tournament_id: int = Field(foreign_key="tournament.id", index=True)
    player_id: int = Field(foreign_key="player.id", index=True)
    time: int
    created_at: datetime = Field(default_factory=datetime.utcnow)
