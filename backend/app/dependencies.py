from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.services.tournament_service import TournamentService


def get_tournament_service(session: Session = Depends(get_session)) -> TournamentService:
    return TournamentService(session)
