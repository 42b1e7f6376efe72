"""
Repositories

Persistence collaborators for the services. Each repository wraps a single
Session and:
- Raises NotFoundError when the referenced row does not exist
- Commits its own writes, rolling back before re-raising on failure
- Never applies tournament rules (those live in app.services)
"""

from app.repositories.player_repository import PlayerRepository
from app.repositories.qualifying_repository import QualifyingRepository
from app.repositories.tournament_repository import TournamentRepository
from app.repositories.user_repository import UserRepository

__all__ = [
    "PlayerRepository",
    "QualifyingRepository",
    "TournamentRepository",
    "UserRepository",
]
