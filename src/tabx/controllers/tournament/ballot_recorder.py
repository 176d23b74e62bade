"""Ballot validation and submission for BP rooms.

This module checks a proposed ballot against the room it belongs to and
commits it. Submission is one-way: there is no edit or un-submit.
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

from collections import Counter
from dataclasses import replace
from typing import Mapping, Optional

from tabx.constants import MAX_SPEAKER_SCORE, MIN_SPEAKER_SCORE, VALID_RANKS
from tabx.controllers.tournament.updates import replace_matchup, require_matchup
from tabx.exceptions import (
    BallotAlreadySubmittedException,
    IncompleteRankingException,
    InvalidBallotException,
    MissingSpeakerScoreException,
    ScoreOutOfRangeException,
    TournamentStateException,
)
from tabx.models.enums import DebateFormat, MatchupStatus, TournamentStatus
from tabx.models.tournament import Ballot, Matchup, Tournament, TournamentConfig
from tabx.utils import setup_logger
from tabx.utils.validation import validate_speaker_score

logger = setup_logger(__name__)


class BallotRecorder:
    """Validates and records ballots.

    This class is responsible for:
    - Checking every speaker has a score inside the configured band
    - Checking the four teams are ranked 1-4 with no repeats
    - Refusing a second ballot for the same room
    - Committing ballot and Completed status in one snapshot
    """

    def __init__(self, config: Optional[TournamentConfig] = None):
        """Initialize the recorder.

        Args:
            config: Supplies the speaker score band. When omitted, the band of
                the tournament being updated is used.
        """
        self.config = config

    def validate_ballot(
        self,
        matchup: Matchup,
        speaker_scores: Mapping[str, int],
        ranks: Mapping[str, int],
        config: Optional[TournamentConfig] = None,
    ) -> Ballot:
        """Validate a proposed ballot for a room.

        Args:
            matchup: The room being scored
            speaker_scores: Participant id -> score, one per speaker
            ranks: Team id -> rank, one per team

        Returns:
            The validated Ballot

        Raises:
            InvalidBallotException: A score is not an integer or belongs to
                someone not speaking in the room
            MissingSpeakerScoreException: A speaker has no score
            ScoreOutOfRangeException: A score lies outside the band
            IncompleteRankingException: Ranks are missing, belong to other
                teams, or are not a permutation of 1..4
        """
        config = config or self.config
        band = (
            config.score_band if config else (MIN_SPEAKER_SCORE, MAX_SPEAKER_SCORE)
        )

        self._validate_scores(matchup, speaker_scores, band)
        self._validate_ranks(matchup, ranks)

        return Ballot(ranks=dict(ranks), speaker_scores=dict(speaker_scores))

    def _validate_scores(
        self, matchup: Matchup, speaker_scores: Mapping[str, int], band
    ) -> None:
        speaker_ids = [speaker.id for speaker in matchup.speakers()]

        strangers = [pid for pid in speaker_scores if pid not in speaker_ids]
        if strangers:
            logger.error(
                "Ballot for %s scores non-speakers: %s", matchup.id, strangers
            )
            raise InvalidBallotException(
                f"Scores given for participants not speaking in {matchup.room}: "
                f"{', '.join(strangers)}"
            )

        missing = [pid for pid in speaker_ids if pid not in speaker_scores]
        if missing:
            logger.warning("Ballot for %s lacks scores for %s", matchup.id, missing)
            raise MissingSpeakerScoreException(
                f"Missing speaker scores for: {', '.join(missing)}"
            )

        for participant_id in speaker_ids:
            score = speaker_scores[participant_id]
            result = validate_speaker_score(score, band[0], band[1])
            if result:
                continue
            if isinstance(score, bool) or not isinstance(score, int):
                raise InvalidBallotException(result.error_message)
            logger.warning(
                "Rejected ballot for %s: %s", matchup.id, result.error_message
            )
            raise ScoreOutOfRangeException(participant_id, score, band)

    def _validate_ranks(self, matchup: Matchup, ranks: Mapping[str, int]) -> None:
        team_ids = matchup.team_ids()

        for team_id in ranks:
            if team_id not in team_ids:
                raise IncompleteRankingException(
                    f"Rank given for team {team_id}, which is not in {matchup.room}",
                    team_id=team_id,
                )

        for team in matchup.team_list():
            if team.id not in ranks or ranks[team.id] is None:
                raise IncompleteRankingException(
                    f"All ranks must be assigned: {team.name} has none",
                    team_id=team.id,
                )

        for team_id, rank in ranks.items():
            if isinstance(rank, bool) or rank not in VALID_RANKS:
                raise IncompleteRankingException(
                    f"Rank {rank!r} for team {team_id} must be one of 1-4",
                    team_id=team_id,
                )

        duplicates = [rank for rank, count in Counter(ranks.values()).items() if count > 1]
        if duplicates:
            logger.warning(
                "Rejected ballot for %s: duplicate ranks %s", matchup.id, duplicates
            )
            raise IncompleteRankingException(
                f"Each team must have a unique rank; repeated: "
                f"{', '.join(str(r) for r in sorted(duplicates))}"
            )

    def submit_ballot(
        self,
        tournament: Tournament,
        round_number: int,
        matchup_id: str,
        speaker_scores: Mapping[str, int],
        ranks: Mapping[str, int],
    ) -> Tournament:
        """Validate and commit a ballot.

        Args:
            tournament: Current snapshot
            round_number: Round of the room (1-indexed)
            matchup_id: Room to score
            speaker_scores: Participant id -> score
            ranks: Team id -> rank

        Returns:
            New snapshot with the ballot present and the room Completed

        Raises:
            TournamentStateException: Tournament is finished or not BP
            BallotAlreadySubmittedException: The room already has a ballot
            BallotException: Any validation failure (see validate_ballot)
        """
        if tournament.status == TournamentStatus.FINISHED:
            raise TournamentStateException(
                f"{tournament.name} is finished; ballots can no longer be submitted"
            )
        if tournament.format != DebateFormat.BP:
            raise TournamentStateException(
                f"Ballots are only supported for {DebateFormat.BP.value}"
            )

        _, matchup = require_matchup(tournament, round_number, matchup_id)
        if matchup.ballot is not None:
            logger.warning(
                "Round %d: ballot for %s already submitted", round_number, matchup.room
            )
            raise BallotAlreadySubmittedException(
                f"A ballot for {matchup.room} in round {round_number} was already "
                "submitted and cannot be changed"
            )

        ballot = self.validate_ballot(
            matchup, speaker_scores, ranks, config=self.config or tournament.config
        )
        completed = replace(matchup, ballot=ballot, status=MatchupStatus.COMPLETED)
        updated = replace_matchup(tournament, round_number, completed)

        logger.info("Round %d: recorded ballot for %s", round_number, matchup.room)
        return updated
