# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from app.models.group import Group  # noqa: F401
from app.models.match import Match  # noqa: F401
from app.models.placement import Placement  # noqa: F401
from app.models.player import Player  # noqa: F401
from app.models.player_group_link import PlayerGroupLink  # noqa: F401
from app.models.qualifying import QualifyingTime  # noqa: F401
from app.models.round import Round  # noqa: F401
from app.models.tournament import Tournament  # noqa: F401
from app.models.user import User  # noqa: F401
