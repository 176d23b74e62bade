"""Copy-on-write helpers for tournament snapshots.

Each helper rebuilds only the nodes on the path to the change. Everything
else is shared with the previous snapshot, which stays untouched.
"""

# TabX
# Copyright (C) 2025  TabX developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import replace
from typing import Tuple

from tabx.exceptions import MatchupNotFoundException, RoundNotFoundException
from tabx.models.tournament import (
    Matchup,
    RoundData,
    Tournament,
    derive_round_status,
)


def require_round(tournament: Tournament, round_number: int) -> RoundData:
    """Get a round or raise RoundNotFoundException."""
    round_data = tournament.get_round(round_number)
    if round_data is None:
        raise RoundNotFoundException(
            f"Round {round_number} does not exist "
            f"({len(tournament.rounds)} rounds so far)"
        )
    return round_data


def require_matchup(
    tournament: Tournament, round_number: int, matchup_id: str
) -> Tuple[RoundData, Matchup]:
    """Get a round and one of its matchups, or raise."""
    round_data = require_round(tournament, round_number)
    matchup = round_data.get_matchup(matchup_id)
    if matchup is None:
        raise MatchupNotFoundException(
            f"Matchup {matchup_id} not found in round {round_number}"
        )
    return round_data, matchup


def replace_round(tournament: Tournament, round_data: RoundData) -> Tournament:
    """Return a snapshot with ``round_data`` swapped in by round number."""
    require_round(tournament, round_data.round_number)
    index = round_data.round_number - 1
    rounds = tournament.rounds[:index] + (round_data,) + tournament.rounds[index + 1 :]
    return replace(tournament, rounds=rounds)


def replace_matchup(
    tournament: Tournament, round_number: int, matchup: Matchup
) -> Tournament:
    """Return a snapshot with ``matchup`` swapped in by id.

    The round's status is re-derived in the same step, so a snapshot never
    shows a matchup change without the matching round status.
    """
    round_data, _ = require_matchup(tournament, round_number, matchup.id)
    matchups = tuple(
        matchup if existing.id == matchup.id else existing
        for existing in round_data.matchups
    )
    new_round = replace(
        round_data, matchups=matchups, status=derive_round_status(matchups)
    )
    return replace_round(tournament, new_round)
