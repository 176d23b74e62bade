"""TournamentStore - the explicit container of tournament state.

The store holds the current snapshot and a version counter. All changes go
through ``dispatch``, which swaps in the reducer's new snapshot only once the
whole event has succeeded. Readers always get a complete snapshot: never a
half-applied change, and never one that changes afterwards.
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

from typing import List, Mapping, Optional, Tuple

from tabx.controllers.tournament.reducer import (
    AppendRound,
    SubmitBallot,
    TournamentEvent,
    apply_event,
)
from tabx.controllers.tournament.round_manager import RoundManager
from tabx.controllers.tournament.tab_calculator import TabCalculator
from tabx.draw import DrawProvider, MotionProvider
from tabx.exceptions import TabXException, TournamentStateException
from tabx.models.enums import DebateFormat
from tabx.models.tournament import SpeakerResult, TeamResult, Tournament
from tabx.utils import setup_logger

logger = setup_logger(__name__)


class TournamentStore:
    """Holds the current tournament snapshot.

    The store coordinates the specialized managers:
    - RoundManager: draws rounds through the draw provider
    - apply_event: every state transition, ballots included
    - TabCalculator: team and speaker tabs of the current snapshot
    """

    def __init__(
        self,
        tournament: Optional[Tournament] = None,
        draw_provider: Optional[DrawProvider] = None,
        motion_provider: Optional[MotionProvider] = None,
    ) -> None:
        self._state: Optional[Tournament] = tournament
        self._version = 0
        self.round_manager = RoundManager(draw_provider, motion_provider)
        self.tab_calculator = TabCalculator()

    # ========== Properties ==========

    @property
    def has_tournament(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> Tournament:
        """Current snapshot.

        Raises:
            TournamentStateException: No tournament has been started
        """
        if self._state is None:
            raise TournamentStateException("No tournament has been started")
        return self._state

    @property
    def version(self) -> int:
        """Number of events applied since the tournament was started or loaded."""
        return self._version

    # ========== Lifecycle ==========

    def start(
        self, name: str, debate_format: DebateFormat = DebateFormat.BP, **settings
    ) -> Tournament:
        """Start a new, empty tournament, discarding any current one."""
        self._state = Tournament.new(name, debate_format, **settings)
        self._version = 0
        logger.info("Started tournament %s (%s)", name, debate_format.value)
        return self._state

    def load(self, tournament: Tournament) -> Tournament:
        """Replace the current tournament with ``tournament``."""
        self._state = tournament
        self._version = 0
        logger.info("Loaded tournament %s", tournament.name)
        return tournament

    def reset(self) -> None:
        """Discard the tournament and everything it owns."""
        if self._state is not None:
            logger.info("Reset tournament %s", self._state.name)
        self._state = None
        self._version = 0

    # ========== Transitions ==========

    def dispatch(self, event: TournamentEvent) -> Tournament:
        """Apply an event to the current snapshot.

        On failure the exception propagates and the store keeps its previous
        snapshot and version.
        """
        current = self.state
        try:
            new_state = apply_event(current, event)
        except TabXException as e:
            logger.warning("Rejected %s: %s", type(event).__name__, e)
            raise

        self._state = new_state
        self._version += 1
        logger.info("Applied %s (version %d)", type(event).__name__, self._version)
        return new_state

    def draw_next_round(self) -> Tuple[Tournament, Tuple[str, ...]]:
        """Draw and append the next round.

        Returns:
            The new snapshot and any warnings from the draw import
        """
        draw = self.round_manager.generate_round(self.state)
        return self.dispatch(AppendRound(draw.round)), draw.warnings

    def submit_ballot(
        self,
        round_number: int,
        matchup_id: str,
        speaker_scores: Mapping[str, int],
        ranks: Mapping[str, int],
    ) -> Tournament:
        """Validate and commit a ballot (see BallotRecorder.submit_ballot)."""
        return self.dispatch(
            SubmitBallot(
                round_number=round_number,
                matchup_id=matchup_id,
                speaker_scores=dict(speaker_scores),
                ranks=dict(ranks),
            )
        )

    # ========== Standings ==========

    def team_standings(self) -> List[TeamResult]:
        """Team tab of the current snapshot."""
        return self.tab_calculator.compute_team_standings(self.state)

    def speaker_standings(self) -> List[SpeakerResult]:
        """Speaker tab of the current snapshot."""
        return self.tab_calculator.compute_speaker_standings(self.state)
