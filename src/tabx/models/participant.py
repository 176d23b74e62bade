"""Participants, adjudicators and teams."""

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

from tabx.constants import SPEAKERS_PER_TEAM
from tabx.utils import generate_id


@dataclass(frozen=True)
class Participant:
    """A speaker registered with the tournament.

    Attributes:
        id: Unique identifier
        name: Display name
    """

    id: str
    name: str

    @classmethod
    def create(cls, name: str) -> "Participant":
        """Create a participant with a fresh id."""
        return cls(id=generate_id(cls.__name__), name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        return cls(id=str(data["id"]), name=data["name"])


@dataclass(frozen=True)
class Adjudicator:
    """A judge. Not linked to teams or participants.

    Attributes:
        id: Unique identifier
        name: Display name
    """

    id: str
    name: str

    @classmethod
    def create(cls, name: str) -> "Adjudicator":
        """Create an adjudicator with a fresh id."""
        return cls(id=generate_id(cls.__name__), name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Adjudicator":
        return cls(id=str(data["id"]), name=data["name"])


@dataclass(frozen=True)
class Team:
    """Two participants debating together.

    A team references its members; it does not own them.

    Attributes:
        id: Unique identifier
        name: Display name
        members: Exactly two participants
    """

    id: str
    name: str
    members: Tuple[Participant, Participant]

    def __post_init__(self) -> None:
        members = tuple(self.members)
        if len(members) != SPEAKERS_PER_TEAM:
            raise ValueError(
                f"Team '{self.name}' needs exactly two members, got {len(members)}"
            )
        if members[0].id == members[1].id:
            raise ValueError(f"Team '{self.name}' lists the same member twice")
        object.__setattr__(self, "members", members)

    @classmethod
    def create(cls, name: str, first: Participant, second: Participant) -> "Team":
        """Create a team with a fresh id."""
        return cls(id=generate_id(cls.__name__), name=name, members=(first, second))

    @property
    def member_ids(self) -> Tuple[str, str]:
        return (self.members[0].id, self.members[1].id)

    def has_member(self, participant_id: str) -> bool:
        """Check if the participant speaks for this team."""
        return participant_id in self.member_ids

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "members": [m.to_dict() for m in self.members],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        first, second = (Participant.from_dict(m) for m in data["members"])
        return cls(id=str(data["id"]), name=data["name"], members=(first, second))
