import json

import pytest

from conftest import ONE_ROOM_DRAW, register_four_teams

from tabx.constants import UNKNOWN_ADJUDICATOR_ID
from tabx.controllers.tournament import (
    AddAdjudicator,
    QuickAddTeams,
    RemoveAdjudicator,
    RoundManager,
    TournamentStore,
)
from tabx.draw import (
    DrawProvider,
    JsonDrawProvider,
    StaticMotionProvider,
    build_draw_request,
    check_draw_preconditions,
    import_draw,
)
from tabx.exceptions import (
    DrawPreconditionException,
    DrawProviderException,
    InvalidDrawException,
    UnknownAdjudicatorException,
    UnknownTeamException,
)
from tabx.models.enums import DebateFormat, MatchupStatus, RoundStatus


class _BrokenProvider(DrawProvider):
    def generate_draw(self, request):
        raise RuntimeError("service unavailable")


def _room(og="Alpha", oo="Bravo", cg="Charlie", co="Delta", judges=("Judge Judy",)):
    return {
        "room": "Room 1",
        "teams": {"OG": og, "OO": oo, "CG": cg, "CO": co},
        "adjudicators": list(judges),
    }


def test_draw_becomes_pending_round(drawn_store):
    round_data = drawn_store.state.rounds[0]
    matchup = round_data.matchups[0]

    assert round_data.round_number == 1
    assert round_data.status == RoundStatus.PENDING
    assert round_data.motion == ""
    assert matchup.id == "1-0"
    assert matchup.room == "Room 1"
    assert matchup.status == MatchupStatus.NOT_STARTED
    assert matchup.ballot is None
    assert [t.id for t in matchup.team_list()] == ["alpha", "bravo", "charlie", "delta"]
    assert matchup.position_of("charlie") == "CG"
    assert [a.id for a in matchup.adjudicators] == ["judy"]


def test_second_round_numbering(drawn_store):
    state, _ = drawn_store.draw_next_round()

    assert [r.round_number for r in state.rounds] == [1, 2]
    assert state.rounds[1].matchups[0].id == "2-0"


def test_unknown_team_aborts_import(store):
    with pytest.raises(UnknownTeamException) as info:
        import_draw(store.state, [_room(co="Zulu")])

    assert info.value.name == "Zulu"


def test_unknown_adjudicator_rejected_by_default(store):
    with pytest.raises(UnknownAdjudicatorException):
        import_draw(store.state, [_room(judges=("Judge Dredd",))])


def test_unknown_adjudicator_placeholder_when_allowed():
    store = TournamentStore(
        draw_provider=JsonDrawProvider([_room(judges=("Judge Judy", "Judge Dredd"))])
    )
    store.start("Lenient Open", allow_unknown_adjudicators=True)
    register_four_teams(store)

    state, warnings = store.draw_next_round()

    adjudicators = state.rounds[0].matchups[0].adjudicators
    assert [a.id for a in adjudicators] == ["judy", UNKNOWN_ADJUDICATOR_ID]
    assert adjudicators[1].name == "Judge Dredd"
    assert len(warnings) == 1 and "Judge Dredd" in warnings[0]


def test_failed_import_appends_nothing(store):
    store.round_manager.draw_provider = JsonDrawProvider([_room(og="Zulu")])
    version = store.version

    with pytest.raises(UnknownTeamException):
        store.draw_next_round()

    assert store.state.rounds == ()
    assert store.version == version


@pytest.mark.parametrize(
    "draw",
    [
        [],
        [_room(oo="Alpha")],
        [{"room": "Room 1", "teams": {"OG": "Alpha", "OO": "Bravo", "CG": "Charlie"}}],
        ["Alpha v Bravo"],
        [{**_room(), "adjudicators": "Judge Judy"}],
    ],
)
def test_malformed_draws_rejected(store, draw):
    with pytest.raises(InvalidDrawException):
        import_draw(store.state, draw)


def test_undrawn_teams_warn():
    store = TournamentStore(draw_provider=JsonDrawProvider(ONE_ROOM_DRAW))
    store.start("Big Open")
    register_four_teams(store)
    store.dispatch(QuickAddTeams(("Echo", "Foxtrot", "Golf", "Hotel")))

    state, warnings = store.draw_next_round()

    assert len(state.rounds[0].matchups) == 1
    assert len(warnings) == 1
    assert "Echo" in warnings[0] and "Hotel" in warnings[0]


def test_draw_preconditions(store):
    check_draw_preconditions(store.state)

    store.dispatch(QuickAddTeams(("Echo",)))
    with pytest.raises(DrawPreconditionException):
        check_draw_preconditions(store.state)


def test_draw_needs_an_adjudicator(store):
    store.dispatch(RemoveAdjudicator("judy"))

    with pytest.raises(DrawPreconditionException):
        store.draw_next_round()


def test_draws_are_bp_only():
    store = TournamentStore(draw_provider=JsonDrawProvider(ONE_ROOM_DRAW))
    store.start("Public Cup", DebateFormat.PUBLIC)
    register_four_teams(store)

    with pytest.raises(DrawPreconditionException):
        store.draw_next_round()


def test_provider_failures_are_wrapped(store):
    with pytest.raises(DrawProviderException):
        RoundManager().generate_round(store.state)
    with pytest.raises(DrawProviderException):
        RoundManager(_BrokenProvider()).generate_round(store.state)


def test_json_provider_serves_draws_in_sequence(store):
    second = [_room(og="Delta", oo="Charlie", cg="Bravo", co="Alpha")]
    provider = JsonDrawProvider(json.dumps([ONE_ROOM_DRAW, second]))
    request = build_draw_request(store.state)

    assert provider.generate_draw(request) == ONE_ROOM_DRAW
    assert provider.generate_draw(request) == second


def test_json_provider_reads_files(store, tmp_path):
    path = tmp_path / "draw.json"
    path.write_text(json.dumps(ONE_ROOM_DRAW), encoding="utf-8")

    request = build_draw_request(store.state)
    assert JsonDrawProvider(path).generate_draw(request) == ONE_ROOM_DRAW
    with pytest.raises(DrawProviderException):
        JsonDrawProvider(tmp_path / "missing.json")


def test_draw_request_lists_past_rooms(drawn_store):
    drawn_store.dispatch(AddAdjudicator("Judge Dee", adjudicator_id="dee"))

    request = build_draw_request(drawn_store.state)

    assert [t["name"] for t in request.teams] == ["Alpha", "Bravo", "Charlie", "Delta"]
    assert [a["id"] for a in request.adjudicators] == ["judy", "dee"]
    assert request.past_matchups == (("Alpha", "Bravo", "Charlie", "Delta"),)
    assert request.to_dict()["past_matchups"] == [["Alpha", "Bravo", "Charlie", "Delta"]]


def test_suggest_motion():
    manager = RoundManager(
        motion_provider=StaticMotionProvider(
            json.dumps({"motions": ["THW ban zoos", "THBT cities should be car-free"]})
        )
    )

    assert manager.suggest_motion("animals") == "THW ban zoos"
    with pytest.raises(DrawProviderException):
        manager.suggest_motion("   ")
    with pytest.raises(DrawProviderException):
        RoundManager().suggest_motion("animals")
