from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.match import Match
    from app.models.round import Round


class Group(SQLModel, table=True):
    # Table name "group" is a reserved word in SQL
    __tablename__ = "playergroup"

    id: Optional[int] = Field(default=None, primary_key=True)
    round_id: int = Field(foreign_key="round.id", index=True)
    name: str

    # Relationships
    round: "Round" = Relationship(back_populates="groups")
    matches: List["Match"] = Relationship(back_populates="group")
