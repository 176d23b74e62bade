"""Exceptions for use in TabX"""

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

from typing import Optional, Tuple


# ========== Base Application Exception ==========


class TabXException(Exception):
    """Base exception for all TabX errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TabXException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class EntityNotFoundException(TournamentException):
    """Raised when a participant, team or adjudicator id is unknown."""

    pass


class InvalidEntityException(TournamentException):
    """Raised when a participant, team or adjudicator is malformed."""

    pass


class DuplicateEntityException(TournamentException):
    """Raised when attempting to add an entity whose id already exists."""

    pass


class ParticipantInTeamException(TournamentException):
    """Raised when removing a participant that a team still references."""

    def __init__(self, participant_id: str, team_name: str):
        super().__init__(
            f"Cannot remove participant {participant_id}: member of team "
            f"'{team_name}'. Remove the team first."
        )
        self.participant_id = participant_id
        self.team_name = team_name


class ParticipantAlreadyOnTeamException(TournamentException):
    """Raised when a participant would belong to two teams."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class MatchupNotFoundException(TournamentException):
    """Raised when a requested matchup does not exist in a round."""

    pass


# ========== Ballot Exceptions ==========


class BallotException(TabXException):
    """Base exception for ballot submission errors."""

    pass


class InvalidBallotException(BallotException):
    """Raised when a ballot is malformed (unknown speaker, non-integer score)."""

    pass


class ScoreOutOfRangeException(BallotException):
    """Raised when a speaker score falls outside the accepted band."""

    def __init__(self, participant_id: str, score: int, band: Tuple[int, int]):
        super().__init__(
            f"Score {score} for {participant_id} must be between "
            f"{band[0]} and {band[1]}"
        )
        self.participant_id = participant_id
        self.score = score
        self.band = band


class MissingSpeakerScoreException(BallotException):
    """Raised when a speaker in the matchup has no score."""

    pass


class IncompleteRankingException(BallotException):
    """Raised when ranks are missing or not a permutation of 1..4."""

    def __init__(self, message: str, team_id: Optional[str] = None):
        super().__init__(message)
        self.team_id = team_id


class BallotAlreadySubmittedException(BallotException):
    """Raised when a ballot is submitted for a matchup that already has one."""

    pass


# ========== Draw Exceptions ==========


class DrawException(TabXException):
    """Base exception for draw import errors."""

    pass


class DrawPreconditionException(DrawException):
    """Raised when the tournament cannot have a draw generated yet."""

    pass


class DrawProviderException(DrawException):
    """Raised when the draw or motion provider fails or returns garbage."""

    pass


class InvalidDrawException(DrawException):
    """Raised when a draw is structurally wrong (missing slots, repeated teams)."""

    pass


class UnknownEntityReferenceException(DrawException):
    """Raised when a draw names a team or adjudicator that does not exist."""

    entity_kind = "entity"

    def __init__(self, name: str):
        super().__init__(
            f'The draw references an unknown {self.entity_kind}: "{name}". '
            "Check the names for typos or regenerate the draw."
        )
        self.name = name


class UnknownTeamException(UnknownEntityReferenceException):
    """Raised when a draw names a team that does not exist."""

    entity_kind = "team"


class UnknownAdjudicatorException(UnknownEntityReferenceException):
    """Raised when a draw names an adjudicator that does not exist."""

    entity_kind = "adjudicator"


# ========== Configuration Exceptions ==========


class ConfigurationException(TabXException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
