from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import UniqueConstraint as SAUniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.group import Group
    from app.models.tournament import Tournament


class Round(SQLModel, table=True):
    __table_args__ = (SAUniqueConstraint("tournament_id", "position", name="uq_tournament_round_position"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    tournament_id: int = Field(foreign_key="tournament.id", index=True)
    position: int  # 0-based; round N feeds round N+1
    name: str
    match_count: int
    player_count: int  # group_count * group_size when the round was created
    player_advancement_count: int  # players leaving each group for the next round
    group_size: int
    group_count: int
    concurrent_group_count: int = Field(default=1)  # scheduling hint only

    # Relationships
    tournament: "Tournament" = Relationship(back_populates="rounds")
    groups: List["Group"] = Relationship(back_populates="round", sa_relationship_kwargs={"order_by": "Group.id"})
