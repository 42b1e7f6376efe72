"""
Repository tests: writes against rows that another session removed in the
meantime must surface as NotFoundError, not as a silent no-op.
"""

import pytest
from sqlalchemy import delete
from sqlmodel import Session

from app.errors import NotFoundError
from app.models.player import Player
from app.models.tournament import Tournament, TournamentStatus
from app.repositories import PlayerRepository, TournamentRepository
from app.services.bracket_builder import GroupDraft, build_tournament
from app.services.bracket_validator import RoundSpec, TournamentSpec
from app.services.status_machine import transition
from tests.conftest import test_engine


def make_spec() -> TournamentSpec:
    return TournamentSpec(
        name="Spring Cup",
        description="Group stage",
        start_date="2026-05-01",
        end_date="2026-05-03",
        player_count=8,
        rounds=[
            RoundSpec(name="Groups", match_count=3, player_advancement_count=2, group_size=4, group_count=2),
            RoundSpec(name="Final", match_count=5, player_advancement_count=1, group_size=4, group_count=1),
        ],
    )


def delete_elsewhere(model, row_id: int) -> None:
    """Remove a row through a second session, as a concurrent request would"""
    with Session(test_engine) as other:
        other.execute(delete(model).where(model.id == row_id))
        other.commit()


@pytest.fixture
def tournaments(session: Session) -> TournamentRepository:
    return TournamentRepository(session)


@pytest.fixture
def players(session: Session) -> PlayerRepository:
    return PlayerRepository(session)


def test_save_status_after_concurrent_delete(tournaments: TournamentRepository):
    tournament = tournaments.insert(build_tournament(make_spec()))
    delete_elsewhere(Tournament, tournament.id)

    with pytest.raises(NotFoundError) as exc_info:
        tournaments.save_status(transition(tournament, TournamentStatus.ACTIVE))

    assert exc_info.value.message == "Tournament not found"


def test_save_status_persists(tournaments: TournamentRepository, session: Session):
    tournament = tournaments.insert(build_tournament(make_spec()))

    tournaments.save_status(transition(tournament, TournamentStatus.COMPLETED))
    session.expire_all()

    assert tournaments.find_by_id(tournament.id).status == TournamentStatus.COMPLETED


def test_delete_after_concurrent_delete(tournaments: TournamentRepository):
    tournament = tournaments.insert(build_tournament(make_spec()))
    tournament_id = tournament.id
    delete_elsewhere(Tournament, tournament_id)

    with pytest.raises(NotFoundError) as exc_info:
        tournaments.delete(tournament_id)

    assert exc_info.value.message == "Tournament not found"


def test_rename_after_concurrent_delete(tournaments: TournamentRepository, players: PlayerRepository):
    tournament = tournaments.insert(build_tournament(make_spec()))
    player = players.insert(tournament.id, "Ada Lovelace")
    delete_elsewhere(Player, player.id)

    with pytest.raises(NotFoundError) as exc_info:
        players.rename(player, "Ada King")

    assert exc_info.value.message == "Player not found"


def test_delete_player_after_concurrent_delete(tournaments: TournamentRepository, players: PlayerRepository):
    tournament = tournaments.insert(build_tournament(make_spec()))
    player = players.insert(tournament.id, "Ada Lovelace")
    player_id = player.id
    delete_elsewhere(Player, player_id)

    with pytest.raises(NotFoundError):
        players.delete(tournament.id, player_id)


def test_insert_writes_drafted_groups(tournaments: TournamentRepository):
    draft = build_tournament(make_spec())
    draft.rounds[0].groups = [GroupDraft(name="A"), GroupDraft(name="B")]

    tournament = tournaments.insert(draft)

    rounds = tournaments.find_by_id(tournament.id).rounds
    assert [g.name for g in rounds[0].groups] == ["A", "B"]
    assert rounds[1].groups == []
