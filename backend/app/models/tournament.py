from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.player import Player
    from app.models.round import Round


class TournamentStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Tournament(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    # Dates are stored as submitted, they are never parsed
    start_date: str
    end_date: str
    status: TournamentStatus = Field(default=TournamentStatus.DRAFT, sa_column=Column(String, nullable=False))
    allow_underfilled_groups: bool = Field(default=False)
    player_count: int
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow, sa_column_kwargs={"onupdate": datetime.utcnow})

    # Relationships
    rounds: List["Round"] = Relationship(
        back_populates="tournament", sa_relationship_kwargs={"order_by": "Round.position"}
    )
    players: List["Player"] = Relationship(
        back_populates="tournament", sa_relationship_kwargs={"order_by": "Player.id"}
    )
