"""Rows of the team and speaker tabs."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from tabx.models.participant import Participant, Team


@dataclass(frozen=True)
class TeamResult:
    """One row of the team tab.

    Attributes:
        team: The team
        points: Team points (3/2/1/0 per first/second/third/fourth)
        total_speaker_score: Sum of both members' speaker scores
        rank_counts: Number of (firsts, seconds, thirds, fourths)
    """

    team: Team
    points: int = 0
    total_speaker_score: int = 0
    rank_counts: Tuple[int, int, int, int] = (0, 0, 0, 0)

    @property
    def debates(self) -> int:
        return sum(self.rank_counts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team.id,
            "team": self.team.name,
            "points": self.points,
            "total_speaker_score": self.total_speaker_score,
            "rank_counts": list(self.rank_counts),
        }


@dataclass(frozen=True)
class SpeakerResult:
    """One row of the speaker tab.

    Attributes:
        participant: The speaker
        team_name: Name of the speaker's current team, or ``NO_TEAM``
        scores: Speaker scores in chronological round order
        average_score: Mean of ``scores``
    """

    participant: Participant
    team_name: str
    scores: Tuple[int, ...]
    average_score: float

    @property
    def total_score(self) -> int:
        return sum(self.scores)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant_id": self.participant.id,
            "speaker": self.participant.name,
            "team": self.team_name,
            "scores": list(self.scores),
            "total_score": self.total_score,
            "average_score": self.average_score,
        }
