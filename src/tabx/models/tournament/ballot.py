"""Data model for a BP ballot."""

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
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Ballot:
    """Judges' decision for one BP room.

    Both mappings are copied into read-only views, so a ballot cannot be
    changed after construction.

    Attributes
    ----------
    ranks : mapping of str to int
        Team id -> rank, 1 being the best. A valid ballot ranks the four
        teams as a permutation of 1..4.
    speaker_scores : mapping of str to int
        Participant id -> speaker score.
    """

    ranks: Mapping[str, int] = field(default_factory=dict)
    speaker_scores: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))
        object.__setattr__(
            self, "speaker_scores", MappingProxyType(dict(self.speaker_scores))
        )

    def team_total(self, participant_ids) -> int:
        """Sum the scores of the given speakers, skipping unscored ones."""
        return sum(
            self.speaker_scores[pid] for pid in participant_ids if pid in self.speaker_scores
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ballot to dictionary."""
        return {
            "ranks": dict(self.ranks),
            "speaker_scores": dict(self.speaker_scores),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ballot":
        """Deserialize ballot from dictionary."""
        return cls(
            ranks={str(k): int(v) for k, v in data.get("ranks", {}).items()},
            speaker_scores={
                str(k): int(v) for k, v in data.get("speaker_scores", {}).items()
            },
        )
