from app.models.group import Group
from app.models.match import Match
from app.models.placement import Placement
from app.models.player import Player
from app.models.player_group_link import PlayerGroupLink
from app.models.qualifying import QualifyingTime
from app.models.round import Round
from app.models.tournament import Tournament, TournamentStatus
from app.models.user import User

__all__ = [
    "Tournament",
    "TournamentStatus",
    "Round",
    "Group",
    "Match",
    "Placement",
    "PlayerGroupLink",
    "Player",
    "QualifyingTime",
    "User",
]
