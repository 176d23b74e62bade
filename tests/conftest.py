import pytest

from tabx.controllers.tournament import (
    AddAdjudicator,
    AddParticipant,
    AddTeam,
    TournamentStore,
)
from tabx.draw import JsonDrawProvider

TEAM_NAMES = ("Alpha", "Bravo", "Charlie", "Delta")

ONE_ROOM_DRAW = [
    {
        "room": "Room 1",
        "teams": {"OG": "Alpha", "OO": "Bravo", "CG": "Charlie", "CO": "Delta"},
        "adjudicators": ["Judge Judy"],
    }
]

IN_ORDER = {"alpha": 1, "bravo": 2, "charlie": 3, "delta": 4}


def speaker_ids():
    return [f"{name.lower()}-{n}" for name in TEAM_NAMES for n in (1, 2)]


def all_scores(score=75):
    return {pid: score for pid in speaker_ids()}


def register_four_teams(store):
    for name in TEAM_NAMES:
        key = name.lower()
        store.dispatch(AddParticipant(f"{name} One", participant_id=f"{key}-1"))
        store.dispatch(AddParticipant(f"{name} Two", participant_id=f"{key}-2"))
        store.dispatch(AddTeam(name, (f"{key}-1", f"{key}-2"), team_id=key))
    store.dispatch(AddAdjudicator("Judge Judy", adjudicator_id="judy"))


@pytest.fixture
def store():
    """Running BP tournament with four teams, one judge and no rounds."""
    store = TournamentStore(draw_provider=JsonDrawProvider(ONE_ROOM_DRAW))
    store.start("Test Open")
    register_four_teams(store)
    return store


@pytest.fixture
def drawn_store(store):
    """As ``store``, with round 1 drawn (matchup ``1-0``)."""
    store.draw_next_round()
    return store
