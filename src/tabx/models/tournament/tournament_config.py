"""TournamentConfig data class."""

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

from tabx.constants import (
    DEFAULT_SPEAKER_SCORE,
    MAX_SPEAKER_SCORE,
    MIN_SPEAKER_SCORE,
    TEAMS_PER_ROOM,
)
from tabx.exceptions import InvalidConfigurationException
from tabx.models.enums import DebateFormat


@dataclass(frozen=True)
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    format : DebateFormat
        Debate format. Only British Parliamentary supports draws and ballots.
    min_speaker_score : int
        Lowest speaker score accepted on a ballot (inclusive).
    max_speaker_score : int
        Highest speaker score accepted on a ballot (inclusive).
    default_speaker_score : int
        Score pre-filled when entering a ballot.
    teams_per_room : int
        Teams in each room of a draw.
    allow_unknown_adjudicators : bool
        When True, a draw naming an unknown adjudicator is imported with a
        placeholder judge and a warning instead of being rejected.
    """

    name: str
    format: DebateFormat = DebateFormat.BP
    min_speaker_score: int = MIN_SPEAKER_SCORE
    max_speaker_score: int = MAX_SPEAKER_SCORE
    default_speaker_score: int = DEFAULT_SPEAKER_SCORE
    teams_per_room: int = TEAMS_PER_ROOM
    allow_unknown_adjudicators: bool = False

    def __post_init__(self) -> None:
        if self.min_speaker_score > self.max_speaker_score:
            raise InvalidConfigurationException(
                f"Speaker score band is empty: {self.min_speaker_score} > "
                f"{self.max_speaker_score}"
            )
        if not (
            self.min_speaker_score
            <= self.default_speaker_score
            <= self.max_speaker_score
        ):
            raise InvalidConfigurationException(
                f"Default speaker score {self.default_speaker_score} lies outside "
                f"{self.min_speaker_score}-{self.max_speaker_score}"
            )
        if self.teams_per_room < 2:
            raise InvalidConfigurationException(
                f"A room needs at least two teams, got {self.teams_per_room}"
            )

    @property
    def score_band(self) -> Tuple[int, int]:
        return (self.min_speaker_score, self.max_speaker_score)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format.value,
            "min_speaker_score": self.min_speaker_score,
            "max_speaker_score": self.max_speaker_score,
            "default_speaker_score": self.default_speaker_score,
            "teams_per_room": self.teams_per_room,
            "allow_unknown_adjudicators": self.allow_unknown_adjudicators,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        try:
            debate_format = DebateFormat(data.get("format", DebateFormat.BP.value))
        except ValueError as e:
            raise InvalidConfigurationException(
                f"Unknown debate format: {data.get('format')!r}"
            ) from e

        return cls(
            name=data.get("name", "Untitled Tournament"),
            format=debate_format,
            min_speaker_score=int(data.get("min_speaker_score", MIN_SPEAKER_SCORE)),
            max_speaker_score=int(data.get("max_speaker_score", MAX_SPEAKER_SCORE)),
            default_speaker_score=int(
                data.get("default_speaker_score", DEFAULT_SPEAKER_SCORE)
            ),
            teams_per_room=int(data.get("teams_per_room", TEAMS_PER_ROOM)),
            allow_unknown_adjudicators=bool(
                data.get("allow_unknown_adjudicators", False)
            ),
        )
