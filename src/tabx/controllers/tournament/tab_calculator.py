"""Tab calculation for BP tournaments.

This module turns the ballots of every round into the team tab and the
speaker tab.
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

from typing import Dict, List

from tabx.constants import NO_TEAM, RANK_POINTS
from tabx.models.tournament import SpeakerResult, TeamResult, Tournament
from tabx.utils import setup_logger

logger = setup_logger(__name__)


def rank_to_points(rank: int) -> int:
    """Team points for a rank: 1->3, 2->2, 3->1, 4->0, anything else 0."""
    return RANK_POINTS.get(rank, 0)


class TabCalculator:
    """Calculates the team and speaker tabs of a tournament.

    Both calculations are pure reads over a ``Tournament`` snapshot:

    Team tab:
    - Team points from ballot ranks (3/2/1/0)
    - Total speaker score of both members across all ballots
    - Sorted by points, then total speaker score

    Speaker tab:
    - Every score a participant received, in round order
    - Average score; speakers with no scores are left out
    - Sorted by average score

    Matchups without a ballot contribute nothing. Ties that survive the sort
    keys keep registration order, since Python's sort is stable.
    """

    def compute_team_standings(self, tournament: Tournament) -> List[TeamResult]:
        """Calculate the team tab.

        Args:
            tournament: Snapshot to tabulate

        Returns:
            One TeamResult per registered team, best first
        """
        points: Dict[str, int] = {team.id: 0 for team in tournament.teams}
        speaker_totals: Dict[str, int] = {team.id: 0 for team in tournament.teams}
        rank_counts: Dict[str, List[int]] = {
            team.id: [0, 0, 0, 0] for team in tournament.teams
        }

        for round_data, matchup in tournament.iter_matchups():
            ballot = matchup.ballot
            if ballot is None or not ballot.ranks:
                continue

            for team_id, rank in ballot.ranks.items():
                if team_id not in points:
                    continue
                points[team_id] += rank_to_points(rank)
                if rank in RANK_POINTS:
                    rank_counts[team_id][rank - 1] += 1

            # Speaker totals follow the draw, not the rank keys
            for team in matchup.team_list():
                if team.id in speaker_totals:
                    speaker_totals[team.id] += ballot.team_total(team.member_ids)

        results = [
            TeamResult(
                team=team,
                points=points[team.id],
                total_speaker_score=speaker_totals[team.id],
                rank_counts=tuple(rank_counts[team.id]),
            )
            for team in tournament.teams
        ]
        results.sort(key=lambda r: (r.points, r.total_speaker_score), reverse=True)

        logger.debug(
            "Team tab for %s: %d teams over %d rounds",
            tournament.name,
            len(results),
            len(tournament.rounds),
        )
        return results

    def compute_speaker_standings(
        self, tournament: Tournament
    ) -> List[SpeakerResult]:
        """Calculate the speaker tab.

        Args:
            tournament: Snapshot to tabulate

        Returns:
            One SpeakerResult per participant with at least one score, best first
        """
        scores: Dict[str, List[int]] = {p.id: [] for p in tournament.participants}

        # Round order, so each speaker's scores read chronologically
        for round_data in sorted(tournament.rounds, key=lambda r: r.round_number):
            for matchup in round_data.matchups:
                ballot = matchup.ballot
                if ballot is None or not ballot.speaker_scores:
                    continue
                for participant_id, score in ballot.speaker_scores.items():
                    if participant_id in scores:
                        scores[participant_id].append(score)

        results = []
        for participant in tournament.participants:
            participant_scores = scores[participant.id]
            if not participant_scores:
                continue
            team = tournament.team_for_participant(participant.id)
            results.append(
                SpeakerResult(
                    participant=participant,
                    team_name=team.name if team else NO_TEAM,
                    scores=tuple(participant_scores),
                    average_score=sum(participant_scores) / len(participant_scores),
                )
            )
        results.sort(key=lambda r: r.average_score, reverse=True)

        logger.debug(
            "Speaker tab for %s: %d of %d participants scored",
            tournament.name,
            len(results),
            len(tournament.participants),
        )
        return results


_default_calculator = TabCalculator()


def compute_team_standings(tournament: Tournament) -> List[TeamResult]:
    """Team tab of ``tournament``, best team first."""
    return _default_calculator.compute_team_standings(tournament)


def compute_speaker_standings(tournament: Tournament) -> List[SpeakerResult]:
    """Speaker tab of ``tournament``, best speaker first."""
    return _default_calculator.compute_speaker_standings(tournament)
