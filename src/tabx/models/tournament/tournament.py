"""Tournament snapshot - the root of all tournament state.

A ``Tournament`` is an immutable value. Every change produces a new snapshot
(see ``tabx.controllers.tournament.reducer``) that shares all untouched parts
with the previous one, so a snapshot handed to the tab calculator can never
change underneath it.
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

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from tabx.exceptions import TournamentStateException
from tabx.models.enums import DebateFormat, TournamentStatus
from tabx.models.participant import Adjudicator, Participant, Team
from tabx.models.tournament.matchup import Matchup
from tabx.models.tournament.round_data import RoundData
from tabx.models.tournament.tournament_config import TournamentConfig


@dataclass(frozen=True)
class Tournament:
    """Immutable snapshot of a whole tournament.

    Attributes:
        config: Name, format and scoring settings
        status: Lifecycle status (setup/running/finished)
        participants: Registered speakers
        teams: Registered teams
        adjudicators: Registered judges
        rounds: Rounds in order, round 1 first
    """

    config: TournamentConfig
    status: TournamentStatus = TournamentStatus.RUNNING
    participants: Tuple[Participant, ...] = ()
    teams: Tuple[Team, ...] = ()
    adjudicators: Tuple[Adjudicator, ...] = ()
    rounds: Tuple[RoundData, ...] = ()

    def __post_init__(self) -> None:
        for name in ("participants", "teams", "adjudicators", "rounds"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @classmethod
    def new(
        cls, name: str, debate_format: DebateFormat = DebateFormat.BP, **settings
    ) -> "Tournament":
        """Start an empty, running tournament."""
        config = TournamentConfig(name=name, format=debate_format, **settings)
        return cls(config=config)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def format(self) -> DebateFormat:
        """Get debate format."""
        return self.config.format

    @property
    def next_round_number(self) -> int:
        return len(self.rounds) + 1

    # ========== Lookups ==========

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        return next((p for p in self.participants if p.id == participant_id), None)

    def get_team(self, team_id: str) -> Optional[Team]:
        return next((t for t in self.teams if t.id == team_id), None)

    def get_adjudicator(self, adjudicator_id: str) -> Optional[Adjudicator]:
        return next((a for a in self.adjudicators if a.id == adjudicator_id), None)

    def find_team_by_name(self, name: str) -> Optional[Team]:
        return next((t for t in self.teams if t.name == name), None)

    def find_adjudicator_by_name(self, name: str) -> Optional[Adjudicator]:
        return next((a for a in self.adjudicators if a.name == name), None)

    def team_for_participant(self, participant_id: str) -> Optional[Team]:
        """Get the team a participant currently speaks for, if any."""
        return next((t for t in self.teams if t.has_member(participant_id)), None)

    def unassigned_participants(self) -> Tuple[Participant, ...]:
        """Participants not yet on any team."""
        return tuple(
            p for p in self.participants if self.team_for_participant(p.id) is None
        )

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round (1-indexed)."""
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        return None

    def iter_matchups(self) -> Iterator[Tuple[RoundData, Matchup]]:
        """Yield (round, matchup) for every room of every round."""
        for round_data in self.rounds:
            for matchup in round_data.matchups:
                yield round_data, matchup

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "config": self.config.to_dict(),
            "status": self.status.value,
            "participants": [p.to_dict() for p in self.participants],
            "teams": [t.to_dict() for t in self.teams],
            "adjudicators": [a.to_dict() for a in self.adjudicators],
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament snapshot

        Raises:
            TournamentStateException: If rounds are not numbered 1..n in order
        """
        rounds = tuple(RoundData.from_dict(r) for r in data.get("rounds", []))
        numbers = [r.round_number for r in rounds]
        if numbers != list(range(1, len(rounds) + 1)):
            raise TournamentStateException(
                f"Rounds must be numbered 1..{len(rounds)} in order, got {numbers}"
            )
        return cls(
            config=TournamentConfig.from_dict(data.get("config", data)),
            status=TournamentStatus(data.get("status", TournamentStatus.RUNNING.value)),
            participants=tuple(
                Participant.from_dict(p) for p in data.get("participants", [])
            ),
            teams=tuple(Team.from_dict(t) for t in data.get("teams", [])),
            adjudicators=tuple(
                Adjudicator.from_dict(a) for a in data.get("adjudicators", [])
            ),
            rounds=rounds,
        )
