from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.group import Group
    from app.models.placement import Placement


class Match(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    group_id: int = Field(foreign_key="playergroup.id", index=True)
    map_name: Optional[str] = Field(default=None)

    # Relationships
    group: "Group" = Relationship(back_populates="matches")
    placements: List["Placement"] = Relationship(back_populates="match")
