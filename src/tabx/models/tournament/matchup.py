"""Data model for a BP matchup (one room of one round)."""

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

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from tabx.constants import BP_POSITIONS
from tabx.models.enums import MatchupStatus
from tabx.models.participant import Adjudicator, Participant, Team
from tabx.models.tournament.ballot import Ballot


@dataclass(frozen=True)
class Matchup:
    """One debate between four teams in one room.

    Attributes
    ----------
    id : str
        Matchup identifier, ``"<round>-<index>"`` for imported draws.
    room : str
        Room label.
    teams : mapping of str to Team
        Position (OG, OO, CG, CO) -> team, as drawn.
    adjudicators : tuple of Adjudicator
        Judges assigned to the room.
    status : MatchupStatus
        Room progress. Completed exactly when a ballot is present.
    ballot : Ballot or None
        The submitted ballot.
    """

    id: str
    room: str
    teams: Mapping[str, Team]
    adjudicators: Tuple[Adjudicator, ...] = ()
    status: MatchupStatus = MatchupStatus.NOT_STARTED
    ballot: Optional[Ballot] = None

    def __post_init__(self) -> None:
        missing = [pos for pos in BP_POSITIONS if pos not in self.teams]
        if missing:
            raise ValueError(
                f"Matchup {self.id} is missing positions: {', '.join(missing)}"
            )
        ordered = {pos: self.teams[pos] for pos in BP_POSITIONS}
        object.__setattr__(self, "teams", MappingProxyType(ordered))
        object.__setattr__(self, "adjudicators", tuple(self.adjudicators))

    @property
    def is_completed(self) -> bool:
        return self.ballot is not None and self.status == MatchupStatus.COMPLETED

    def team_list(self) -> List[Team]:
        """Teams in speaking order (OG, OO, CG, CO)."""
        return [self.teams[pos] for pos in BP_POSITIONS]

    def team_ids(self) -> List[str]:
        return [team.id for team in self.team_list()]

    def speakers(self) -> List[Participant]:
        """All speakers in the room, in speaking order."""
        return [member for team in self.team_list() for member in team.members]

    def position_of(self, team_id: str) -> Optional[str]:
        """Get the position a team was drawn in, or None."""
        for pos, team in self.teams.items():
            if team.id == team_id:
                return pos
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize matchup to dictionary."""
        return {
            "id": self.id,
            "room": self.room,
            "teams": {pos: team.to_dict() for pos, team in self.teams.items()},
            "adjudicators": [a.to_dict() for a in self.adjudicators],
            "status": self.status.value,
            "ballot": self.ballot.to_dict() if self.ballot else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Matchup":
        """Deserialize matchup from dictionary."""
        ballot_data = data.get("ballot")
        return cls(
            id=str(data["id"]),
            room=data.get("room", ""),
            teams={pos: Team.from_dict(t) for pos, t in data["teams"].items()},
            adjudicators=tuple(
                Adjudicator.from_dict(a) for a in data.get("adjudicators", [])
            ),
            status=MatchupStatus(data.get("status", MatchupStatus.NOT_STARTED.value)),
            ballot=Ballot.from_dict(ballot_data) if ballot_data else None,
        )
