"""Data model for tournament round."""

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
from typing import Any, Dict, Optional, Tuple

from tabx.models.enums import MatchupStatus, RoundStatus
from tabx.models.tournament.matchup import Matchup


def derive_round_status(matchups: Tuple[Matchup, ...]) -> RoundStatus:
    """Work out a round's status from its rooms."""
    if matchups and all(m.status == MatchupStatus.COMPLETED for m in matchups):
        return RoundStatus.COMPLETED
    if any(m.status != MatchupStatus.NOT_STARTED for m in matchups):
        return RoundStatus.IN_PROGRESS
    return RoundStatus.PENDING


@dataclass(frozen=True)
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    motion : str
        Motion debated this round. Empty until one is set.
    status : RoundStatus
        Progress of the round.
    matchups : tuple of Matchup
        Rooms in draw order.
    """

    round_number: int
    motion: str = ""
    status: RoundStatus = RoundStatus.PENDING
    matchups: Tuple[Matchup, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchups", tuple(self.matchups))

    @property
    def is_completed(self) -> bool:
        return self.status == RoundStatus.COMPLETED

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.matchups if m.status == MatchupStatus.COMPLETED)

    def get_matchup(self, matchup_id: str) -> Optional[Matchup]:
        for matchup in self.matchups:
            if matchup.id == matchup_id:
                return matchup
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "motion": self.motion,
            "status": self.status.value,
            "matchups": [m.to_dict() for m in self.matchups],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=int(data["round_number"]),
            motion=data.get("motion", ""),
            status=RoundStatus(data.get("status", RoundStatus.PENDING.value)),
            matchups=tuple(Matchup.from_dict(m) for m in data.get("matchups", [])),
        )
