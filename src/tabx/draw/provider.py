"""Draw and motion providers.

Draws and motions come from an outside generator (a generative text service
in the hosted app). TabX only defines what it sends and what it expects
back:

- ``DrawRequest``: teams, adjudicators and past room line-ups
- a draw: a JSON list of rooms, each
  ``{"room": str, "teams": {"OG", "OO", "CG", "CO": team name},
  "adjudicators": [adjudicator name, ...]}``
- motions: a JSON list of strings

The JSON-backed providers below serve pre-made draws and motions. The CLI
and the tests use them.
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

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

from tabx.exceptions import DrawProviderException
from tabx.models.tournament import Tournament
from tabx.utils import setup_logger

logger = setup_logger(__name__)

DrawData = List[Dict[str, Any]]


@dataclass(frozen=True)
class DrawRequest:
    """Everything a draw generator gets to see.

    Attributes:
        teams: ``{"id", "name"}`` for every team
        adjudicators: ``{"id", "name"}`` for every adjudicator
        past_matchups: Team names of each earlier room, in OG/OO/CG/CO order
    """

    teams: Tuple[Dict[str, str], ...]
    adjudicators: Tuple[Dict[str, str], ...]
    past_matchups: Tuple[Tuple[str, ...], ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teams": list(self.teams),
            "adjudicators": list(self.adjudicators),
            "past_matchups": [list(m) for m in self.past_matchups],
        }


def build_draw_request(tournament: Tournament) -> DrawRequest:
    """Build the payload for the next round's draw."""
    return DrawRequest(
        teams=tuple({"id": t.id, "name": t.name} for t in tournament.teams),
        adjudicators=tuple(
            {"id": a.id, "name": a.name} for a in tournament.adjudicators
        ),
        past_matchups=tuple(
            tuple(team.name for team in matchup.team_list())
            for _, matchup in tournament.iter_matchups()
        ),
    )


class DrawProvider(ABC):
    """Source of draws for new rounds."""

    @abstractmethod
    def generate_draw(self, request: DrawRequest) -> DrawData:
        """Return the rooms of the next round.

        Raises:
            DrawProviderException: The draw could not be produced
        """


class MotionProvider(ABC):
    """Source of motion suggestions."""

    @abstractmethod
    def generate_motions(self, theme: str) -> List[str]:
        """Return candidate motions for ``theme``.

        Raises:
            DrawProviderException: No motions could be produced
        """


def load_json(source: Union[str, Path]) -> Any:
    """Parse JSON from a file path or a JSON string."""
    try:
        if isinstance(source, Path) or (
            isinstance(source, str) and not source.lstrip().startswith(("[", "{"))
        ):
            text = Path(source).read_text(encoding="utf-8")
        else:
            text = source
        return json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        raise DrawProviderException(f"Could not read JSON from provider: {e}") from e


class JsonDrawProvider(DrawProvider):
    """Serves draws that were produced elsewhere.

    The source is a single draw (a list of rooms) or a list of draws, one per
    round. With several draws, each call returns the next one.
    """

    def __init__(self, source: Union[str, Path, Sequence[Any]]):
        data = source if isinstance(source, (list, tuple)) else load_json(source)
        if not isinstance(data, (list, tuple)):
            raise DrawProviderException("A draw must be a JSON list of rooms")

        if data and all(isinstance(item, (list, tuple)) for item in data):
            self._draws: List[DrawData] = [list(draw) for draw in data]
        else:
            self._draws = [list(data)]
        self._calls = 0

    def generate_draw(self, request: DrawRequest) -> DrawData:
        index = min(self._calls, len(self._draws) - 1)
        self._calls += 1
        draw = self._draws[index]
        logger.debug(
            "Serving stored draw %d with %d rooms for %d teams",
            index + 1,
            len(draw),
            len(request.teams),
        )
        return draw


class StaticMotionProvider(MotionProvider):
    """Serves a fixed list of motions whatever the theme."""

    def __init__(self, motions: Union[str, Path, Sequence[str]]):
        data = motions if isinstance(motions, (list, tuple)) else load_json(motions)
        if isinstance(data, dict):
            data = data.get("motions", [])
        if not isinstance(data, (list, tuple)) or not all(
            isinstance(m, str) for m in data
        ):
            raise DrawProviderException("Motions must be a JSON list of strings")
        self.motions = [m.strip() for m in data if m.strip()]

    def generate_motions(self, theme: str) -> List[str]:
        logger.debug("Serving %d stored motions for theme %r", len(self.motions), theme)
        return list(self.motions)
