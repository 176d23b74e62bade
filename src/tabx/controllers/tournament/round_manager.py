"""Round management for tournaments.

This module handles drawing new rounds, motions and room status changes.
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

from dataclasses import replace
from typing import Optional

from tabx.constants import UNKNOWN_ADJUDICATOR_ID
from tabx.controllers.tournament.updates import (
    replace_matchup,
    replace_round,
    require_matchup,
    require_round,
)
from tabx.draw import (
    DrawImport,
    DrawProvider,
    MotionProvider,
    build_draw_request,
    check_draw_preconditions,
    import_draw,
)
from tabx.exceptions import (
    DrawProviderException,
    InvalidDrawException,
    TournamentStateException,
)
from tabx.models.enums import MatchupStatus, RoundStatus
from tabx.models.tournament import RoundData, Tournament
from tabx.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression for tournaments.

    This class is responsible for:
    - Asking the draw provider for the next round and importing it
    - Appending rounds (rounds are never removed)
    - Setting and suggesting motions
    - Moving rooms between the statuses that do not need a ballot
    """

    def __init__(
        self,
        draw_provider: Optional[DrawProvider] = None,
        motion_provider: Optional[MotionProvider] = None,
    ):
        """Initialize the round manager.

        Args:
            draw_provider: Source of draws for generate_round
            motion_provider: Source of motions for suggest_motion
        """
        self.draw_provider = draw_provider
        self.motion_provider = motion_provider

    def generate_round(self, tournament: Tournament) -> DrawImport:
        """Draw the next round through the draw provider.

        The round is returned, not appended; dispatch ``AppendRound`` with it.

        Raises:
            DrawPreconditionException: The tournament cannot be drawn yet
            DrawProviderException: No provider, or the provider failed
            DrawException: The returned draw could not be resolved
        """
        check_draw_preconditions(tournament)
        if self.draw_provider is None:
            raise DrawProviderException("No draw provider configured")

        request = build_draw_request(tournament)
        try:
            draw_data = self.draw_provider.generate_draw(request)
        except DrawProviderException:
            raise
        except Exception as e:
            logger.exception("Draw provider failed")
            raise DrawProviderException(
                "Failed to generate a valid draw. Check the provider and input data."
            ) from e

        return import_draw(tournament, draw_data)

    def append_round(self, tournament: Tournament, new_round: RoundData) -> Tournament:
        """Append a freshly drawn round.

        The round must be numbered as the next round, and every room must be
        unscored and Not Started, seat registered teams at most once and
        list registered adjudicators. Ballots only enter through submission.

        Raises:
            TournamentStateException: Wrong round number, or a room already
                carries a ballot or progress
            InvalidDrawException: Unregistered teams or adjudicators,
                repeated matchup ids or a team seated twice
        """
        expected = tournament.next_round_number
        if new_round.round_number != expected:
            raise TournamentStateException(
                f"Next round must be round {expected}, got {new_round.round_number}"
            )
        if new_round.status != RoundStatus.PENDING or new_round.matchups == ():
            raise TournamentStateException(
                f"Round {expected} must be Pending and have at least one room"
            )

        matchup_ids = set()
        seated = set()
        for matchup in new_round.matchups:
            if matchup.ballot is not None or matchup.status != MatchupStatus.NOT_STARTED:
                raise TournamentStateException(
                    f"{matchup.room} is {matchup.status.value}; new rooms start "
                    "Not Started and are scored by submitting a ballot"
                )
            if matchup.id in matchup_ids:
                raise InvalidDrawException(
                    f"Matchup id {matchup.id} is used twice in round {expected}"
                )
            matchup_ids.add(matchup.id)

            for team in matchup.team_list():
                if tournament.get_team(team.id) is None:
                    raise InvalidDrawException(
                        f"{matchup.room} seats unregistered team '{team.name}'"
                    )
                if team.id in seated:
                    raise InvalidDrawException(
                        f"Team '{team.name}' is seated twice in round {expected}"
                    )
                seated.add(team.id)

            for adjudicator in matchup.adjudicators:
                if tournament.get_adjudicator(adjudicator.id) is not None:
                    continue
                if (
                    adjudicator.id == UNKNOWN_ADJUDICATOR_ID
                    and tournament.config.allow_unknown_adjudicators
                ):
                    continue
                raise InvalidDrawException(
                    f"{matchup.room} lists unregistered adjudicator "
                    f"'{adjudicator.name}'"
                )

        logger.info(
            "Appending round %d with %d rooms", expected, len(new_round.matchups)
        )
        return replace(tournament, rounds=tournament.rounds + (new_round,))

    def set_motion(
        self, tournament: Tournament, round_number: int, motion: str
    ) -> Tournament:
        """Set or edit the motion of a round."""
        round_data = require_round(tournament, round_number)
        logger.info("Round %d motion set", round_number)
        return replace_round(tournament, replace(round_data, motion=motion.strip()))

    def suggest_motion(self, theme: str) -> str:
        """Get the first motion the motion provider offers for ``theme``."""
        if self.motion_provider is None:
            raise DrawProviderException("No motion provider configured")
        if not theme or not theme.strip():
            raise DrawProviderException("Please provide a theme for the motions.")

        try:
            motions = self.motion_provider.generate_motions(theme.strip())
        except DrawProviderException:
            raise
        except Exception as e:
            logger.exception("Motion provider failed")
            raise DrawProviderException("Failed to generate motions.") from e

        if not motions:
            raise DrawProviderException(f"No motions returned for theme {theme!r}")
        return motions[0]

    def set_matchup_status(
        self,
        tournament: Tournament,
        round_number: int,
        matchup_id: str,
        status: MatchupStatus,
    ) -> Tournament:
        """Move a room to a status that needs no ballot.

        Completed is reached only by submitting a ballot, and a room that has
        a ballot keeps its Completed status.
        """
        _, matchup = require_matchup(tournament, round_number, matchup_id)
        if status == MatchupStatus.COMPLETED:
            raise TournamentStateException(
                "A room becomes Completed only by submitting its ballot"
            )
        if matchup.ballot is not None:
            raise TournamentStateException(
                f"{matchup.room} already has a ballot; its status cannot change"
            )

        logger.debug(
            "Round %d: %s %s -> %s",
            round_number,
            matchup.room,
            matchup.status.value,
            status.value,
        )
        return replace_matchup(tournament, round_number, replace(matchup, status=status))
