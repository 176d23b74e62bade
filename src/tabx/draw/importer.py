"""Turning a provider's draw into a round.

The provider answers with names. Each name is resolved to a registered
team or adjudicator before anything enters the tournament.
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
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from tabx.constants import BP_POSITIONS, UNKNOWN_ADJUDICATOR_ID
from tabx.exceptions import (
    DrawPreconditionException,
    InvalidDrawException,
    UnknownAdjudicatorException,
    UnknownTeamException,
)
from tabx.models.enums import DebateFormat, MatchupStatus, RoundStatus
from tabx.models.participant import Adjudicator, Team
from tabx.models.tournament import Matchup, RoundData, Tournament, TournamentConfig
from tabx.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class DrawImport:
    """Outcome of importing a draw.

    Attributes:
        round: The new round, ready to append
        warnings: Problems that did not stop the import
    """

    round: RoundData
    warnings: Tuple[str, ...] = ()


def check_draw_preconditions(tournament: Tournament) -> None:
    """Make sure the tournament can have its next round drawn.

    Raises:
        DrawPreconditionException: Wrong format, team count or no adjudicators
    """
    if tournament.format != DebateFormat.BP:
        raise DrawPreconditionException(
            f"Draws are only supported for {DebateFormat.BP.value}"
        )

    per_room = tournament.config.teams_per_room
    team_count = len(tournament.teams)
    if team_count < per_room or team_count % per_room != 0:
        raise DrawPreconditionException(
            f"BP format requires at least {per_room} teams, and the total number "
            f"must be a multiple of {per_room} (have {team_count})."
        )

    if not tournament.adjudicators:
        raise DrawPreconditionException(
            "Please add at least one adjudicator before generating a draw."
        )


class DrawImporter:
    """Resolves a provider draw against the tournament's registrations.

    Unknown team names always fail the import. Unknown adjudicator names fail
    too, unless the tournament config allows them. In that case they become
    placeholder judges and the import reports a warning for each one.
    """

    def __init__(self, tournament: Tournament, config: Optional[TournamentConfig] = None):
        self.tournament = tournament
        self.config = config or tournament.config
        self.warnings: List[str] = []

    def import_draw(self, draw_data: Sequence[Dict[str, Any]]) -> DrawImport:
        """Build the next round from ``draw_data``.

        Args:
            draw_data: Rooms as returned by a DrawProvider

        Returns:
            DrawImport with a Pending round and an empty motion

        Raises:
            InvalidDrawException: Malformed rooms, or a team drawn twice
            UnknownTeamException: A team name matches no team
            UnknownAdjudicatorException: An adjudicator name matches no
                adjudicator and placeholders are not allowed
        """
        if not isinstance(draw_data, (list, tuple)) or not draw_data:
            raise InvalidDrawException("The draw contains no rooms")

        self.warnings = []
        round_number = self.tournament.next_round_number
        drawn: Set[str] = set()
        matchups = []

        for index, room_data in enumerate(draw_data):
            matchup = self._build_matchup(round_number, index, room_data)
            for team in matchup.team_list():
                if team.id in drawn:
                    raise InvalidDrawException(
                        f"Team '{team.name}' is drawn more than once in round "
                        f"{round_number}"
                    )
                drawn.add(team.id)
            matchups.append(matchup)

        undrawn = [t.name for t in self.tournament.teams if t.id not in drawn]
        if undrawn:
            message = f"Teams missing from the round {round_number} draw: {', '.join(undrawn)}"
            logger.warning(message)
            self.warnings.append(message)

        new_round = RoundData(
            round_number=round_number,
            motion="",
            status=RoundStatus.PENDING,
            matchups=tuple(matchups),
        )
        logger.info(
            "Imported draw for round %d: %d rooms, %d warnings",
            round_number,
            len(matchups),
            len(self.warnings),
        )
        return DrawImport(round=new_round, warnings=tuple(self.warnings))

    def _build_matchup(
        self, round_number: int, index: int, room_data: Dict[str, Any]
    ) -> Matchup:
        if not isinstance(room_data, dict):
            raise InvalidDrawException(f"Room {index + 1} is not an object")

        teams_data = room_data.get("teams")
        if not isinstance(teams_data, dict):
            raise InvalidDrawException(f"Room {index + 1} has no team positions")
        missing = [pos for pos in BP_POSITIONS if not teams_data.get(pos)]
        if missing:
            raise InvalidDrawException(
                f"Room {index + 1} is missing positions: {', '.join(missing)}"
            )

        adjudicator_names = room_data.get("adjudicators") or []
        if not isinstance(adjudicator_names, list):
            raise InvalidDrawException(
                f"Room {index + 1} adjudicators must be a list of names"
            )

        return Matchup(
            id=f"{round_number}-{index}",
            room=str(room_data.get("room") or f"Room {index + 1}"),
            teams={pos: self._find_team(teams_data[pos]) for pos in BP_POSITIONS},
            adjudicators=tuple(self._find_adjudicator(n) for n in adjudicator_names),
            status=MatchupStatus.NOT_STARTED,
            ballot=None,
        )

    def _find_team(self, name: str) -> Team:
        team = self.tournament.find_team_by_name(name)
        if team is None:
            logger.error("Draw names unknown team %r", name)
            raise UnknownTeamException(name)
        return team

    def _find_adjudicator(self, name: str) -> Adjudicator:
        adjudicator = self.tournament.find_adjudicator_by_name(name)
        if adjudicator is not None:
            return adjudicator

        if not self.config.allow_unknown_adjudicators:
            logger.error("Draw names unknown adjudicator %r", name)
            raise UnknownAdjudicatorException(name)

        message = f'Unknown adjudicator "{name}" added as a placeholder'
        logger.warning(message)
        self.warnings.append(message)
        return Adjudicator(id=UNKNOWN_ADJUDICATOR_ID, name=name)


def import_draw(
    tournament: Tournament,
    draw_data: Sequence[Dict[str, Any]],
    config: Optional[TournamentConfig] = None,
) -> DrawImport:
    """Resolve ``draw_data`` into the tournament's next round."""
    return DrawImporter(tournament, config).import_draw(draw_data)
