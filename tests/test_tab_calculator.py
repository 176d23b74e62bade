import random
from dataclasses import replace

from conftest import IN_ORDER, ONE_ROOM_DRAW, all_scores, register_four_teams

from tabx.constants import NO_TEAM
from tabx.controllers.tournament import (
    AddParticipant,
    QuickAddTeams,
    RemoveTeam,
    TabCalculator,
    TournamentStore,
    compute_speaker_standings,
    compute_team_standings,
    rank_to_points,
)
from tabx.controllers.tournament.updates import replace_matchup
from tabx.draw import JsonDrawProvider
from tabx.models.tournament import Ballot
from tabx.testing.rtg import RandomTournamentGenerator, ResultPattern, RTGConfig


def _generated(seed=11, completion_rate=1.0):
    config = RTGConfig(
        num_teams=12,
        num_rounds=4,
        num_adjudicators=3,
        result_pattern=ResultPattern.RANDOM,
        completion_rate=completion_rate,
        seed=seed,
    )
    return RandomTournamentGenerator(config).generate_complete_tournament()


def _rows(team_results):
    return [(r.team.id, r.points, r.total_speaker_score) for r in team_results]


def test_rank_to_points_table():
    assert [rank_to_points(rank) for rank in (1, 2, 3, 4)] == [3, 2, 1, 0]
    assert rank_to_points(0) == 0
    assert rank_to_points(5) == 0


def test_no_rounds_gives_zero_rows_in_registration_order(store):
    teams = compute_team_standings(store.state)

    assert [r.team.name for r in teams] == ["Alpha", "Bravo", "Charlie", "Delta"]
    assert all(r.points == 0 and r.total_speaker_score == 0 for r in teams)
    assert compute_speaker_standings(store.state) == []


def test_single_room_team_and_speaker_tabs(drawn_store):
    drawn_store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)

    teams = drawn_store.team_standings()
    assert [(r.team.name, r.points, r.total_speaker_score) for r in teams] == [
        ("Alpha", 3, 150),
        ("Bravo", 2, 150),
        ("Charlie", 1, 150),
        ("Delta", 0, 150),
    ]
    assert teams[0].rank_counts == (1, 0, 0, 0)
    assert teams[3].rank_counts == (0, 0, 0, 1)

    speakers = drawn_store.speaker_standings()
    assert len(speakers) == 8
    assert all(s.average_score == 75.0 for s in speakers)
    assert all(s.scores == (75,) for s in speakers)


def test_points_total_six_per_ballot():
    tournament = _generated(completion_rate=0.7)
    ballots = sum(1 for _, m in tournament.iter_matchups() if m.ballot is not None)

    teams = compute_team_standings(tournament)

    assert sum(r.points for r in teams) == 6 * ballots
    assert sum(r.debates for r in teams) == 4 * ballots


def test_standings_ignore_round_and_room_order():
    tournament = _generated(seed=5)
    shuffler = random.Random(99)
    rounds = []
    for round_data in tournament.rounds:
        matchups = list(round_data.matchups)
        shuffler.shuffle(matchups)
        rounds.append(replace(round_data, matchups=tuple(matchups)))
    shuffler.shuffle(rounds)
    shuffled = replace(tournament, rounds=tuple(rounds))

    assert _rows(compute_team_standings(shuffled)) == _rows(
        compute_team_standings(tournament)
    )
    assert [s.to_dict() for s in compute_speaker_standings(shuffled)] == [
        s.to_dict() for s in compute_speaker_standings(tournament)
    ]


def test_rooms_without_ballot_contribute_nothing(drawn_store):
    drawn_store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)
    before = _rows(drawn_store.team_standings())

    drawn_store.draw_next_round()

    assert _rows(drawn_store.team_standings()) == before
    assert all(s.scores == (75,) for s in drawn_store.speaker_standings())


def test_speaker_scores_are_chronological(drawn_store):
    drawn_store.draw_next_round()
    drawn_store.submit_ballot(2, "2-0", all_scores(80), IN_ORDER)
    drawn_store.submit_ballot(1, "1-0", all_scores(70), IN_ORDER)

    speakers = drawn_store.speaker_standings()

    assert all(s.scores == (70, 80) for s in speakers)
    assert all(s.average_score == 75.0 for s in speakers)


def test_speaker_averages_sort_best_first(drawn_store):
    scores = all_scores(75)
    scores["delta-2"] = 81
    scores["alpha-1"] = 69
    drawn_store.submit_ballot(1, "1-0", scores, IN_ORDER)

    speakers = drawn_store.speaker_standings()

    assert speakers[0].participant.id == "delta-2"
    assert speakers[-1].participant.id == "alpha-1"
    # Delta still has the most speaks of the last-placed team
    delta = [r for r in drawn_store.team_standings() if r.team.id == "delta"][0]
    assert delta.total_speaker_score == 156


def test_unscored_participants_left_out_of_speaker_tab(drawn_store):
    drawn_store.dispatch(AddParticipant("Late Registration", participant_id="late"))
    drawn_store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)

    ids = [s.participant.id for s in drawn_store.speaker_standings()]

    assert "late" not in ids
    assert len(ids) == 8


def test_teamless_speakers_show_placeholder_team(drawn_store):
    drawn_store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)
    drawn_store.dispatch(RemoveTeam("delta"))

    speakers = {s.participant.id: s for s in drawn_store.speaker_standings()}
    teams = drawn_store.team_standings()

    assert speakers["delta-1"].team_name == NO_TEAM
    assert speakers["alpha-1"].team_name == "Alpha"
    assert "delta" not in [r.team.id for r in teams]


def test_out_of_range_rank_scores_zero(drawn_store):
    tournament = drawn_store.state
    matchup = tournament.rounds[0].matchups[0]
    odd = replace(
        matchup,
        ballot=Ballot(
            ranks={"alpha": 7, "bravo": 2, "charlie": 3, "delta": 4},
            speaker_scores=all_scores(75),
        ),
    )
    tournament = replace_matchup(tournament, 1, odd)

    alpha = [r for r in compute_team_standings(tournament) if r.team.id == "alpha"][0]

    assert alpha.points == 0
    assert alpha.rank_counts == (0, 0, 0, 0)
    assert alpha.total_speaker_score == 150


def test_tabulation_is_repeatable_and_read_only():
    tournament = _generated(seed=21)
    snapshot = tournament.to_dict()
    calculator = TabCalculator()

    first = _rows(calculator.compute_team_standings(tournament))
    second = _rows(calculator.compute_team_standings(tournament))
    calculator.compute_speaker_standings(tournament)

    assert first == second
    assert tournament.to_dict() == snapshot


def test_winning_every_room_earns_three_per_round(drawn_store):
    rounds = 3
    drawn_store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)
    for number in range(2, rounds + 1):
        drawn_store.draw_next_round()
        drawn_store.submit_ballot(number, f"{number}-0", all_scores(75), IN_ORDER)

    alpha = drawn_store.team_standings()[0]

    assert alpha.team.id == "alpha"
    assert alpha.points == 3 * rounds
    assert alpha.rank_counts == (rounds, 0, 0, 0)


def test_speakers_of_unscored_rooms_left_out():
    second_room = {
        "room": "Room 2",
        "teams": {"OG": "Echo", "OO": "Foxtrot", "CG": "Golf", "CO": "Hotel"},
        "adjudicators": ["Judge Judy"],
    }
    store = TournamentStore(draw_provider=JsonDrawProvider(ONE_ROOM_DRAW + [second_room]))
    store.start("Two Room Open")
    register_four_teams(store)
    store.dispatch(QuickAddTeams(("Echo", "Foxtrot", "Golf", "Hotel")))
    store.draw_next_round()

    store.submit_ballot(1, "1-0", all_scores(75), IN_ORDER)

    speakers = store.speaker_standings()
    assert sorted(s.participant.id for s in speakers) == sorted(all_scores())
    assert {s.team_name for s in speakers} == {"Alpha", "Bravo", "Charlie", "Delta"}
    assert store.state.rounds[0].matchups[1].ballot is None
