from sqlmodel import Field, SQLModel


class PlayerGroupLink(SQLModel, table=True):
    """Membership of a player in a group (filled by seeding, which is not implemented)"""

    player_id: int = Field(foreign_key="player.id", primary_key=True)
    group_id: int = Field(foreign_key="playergroup.id", primary_key=True)
