from typing import TYPE_CHECKING, Optional

from sqlalchemy import UniqueConstraint as SAUniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.match import Match


class Placement(SQLModel, table=True):
    __table_args__ = (SAUniqueConstraint("match_id", "player_id", name="uq_match_player"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: int = Field(foreign_key="match.id", index=True)
    player_id: int = Field(foreign_key="player.id")
    placement: int  # 1 = winner

    # Relationship
    match: "Match" = Relationship(back_populates="placements")
