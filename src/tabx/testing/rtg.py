"""Random Tournament Generator (RTG) for TabX.

This module generates complete BP tournaments with random but valid draws
and ballots. The tournaments drive the tab calculator in tests and in the
``tabx-test`` CLI. Everything goes through the store, so each generated
tournament has passed the same validation as real input.
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

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from tabx.constants import (
    BP_POSITIONS,
    DEFAULT_SPEAKER_SCORE,
    MAX_SPEAKER_SCORE,
    MIN_SPEAKER_SCORE,
    TEAMS_PER_ROOM,
)
from tabx.controllers.tournament import (
    AddAdjudicator,
    QuickAddTeams,
    SetMotion,
    TournamentStore,
)
from tabx.draw import DrawProvider, DrawRequest
from tabx.models.tournament import Matchup, Tournament
from tabx.utils import setup_logger
from tabx.utils.validation import validate_positive_integer

logger = setup_logger(__name__)


class ResultPattern(Enum):
    """Ballot generation patterns."""

    RANDOM = "random"
    REALISTIC = "realistic"
    PREDICTABLE = "predictable"


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    num_teams: int = 16
    num_rounds: int = 5
    num_adjudicators: int = 6
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    min_score: int = MIN_SPEAKER_SCORE
    max_score: int = MAX_SPEAKER_SCORE
    # Centre of simulated speaks; stored as the tournament default score
    default_score: int = DEFAULT_SPEAKER_SCORE
    # Share of rooms per round that get a ballot (1.0 = all)
    completion_rate: float = 1.0
    name: str = "Random Open"


class RandomDrawProvider(DrawProvider):
    """Draw provider that seats teams in random rooms.

    Adjudicators are dealt round-robin across the rooms. It answers in the
    same JSON shape as a real provider, so its draws go through the normal
    import.
    """

    def __init__(self, rng: random.Random):
        self.random = rng

    def generate_draw(self, request: DrawRequest) -> List[Dict]:
        team_names = [team["name"] for team in request.teams]
        self.random.shuffle(team_names)
        room_count = len(team_names) // TEAMS_PER_ROOM

        rooms = []
        for index in range(room_count):
            seated = team_names[index * TEAMS_PER_ROOM : (index + 1) * TEAMS_PER_ROOM]
            rooms.append(
                {
                    "room": f"Room {index + 1}",
                    "teams": dict(zip(BP_POSITIONS, seated)),
                    "adjudicators": [],
                }
            )
        for index, adjudicator in enumerate(request.adjudicators):
            rooms[index % room_count]["adjudicators"].append(adjudicator["name"])
        return rooms


class BallotSimulator:
    """Produces plausible ballots for a room."""

    def __init__(self, config: RTGConfig, rng: random.Random):
        self.config = config
        self.random = rng
        self.strength: Dict[str, float] = {}

    def _team_strength(self, team_id: str) -> float:
        if team_id not in self.strength:
            self.strength[team_id] = self.random.gauss(0.0, 1.0)
        return self.strength[team_id]

    def _clamp(self, score: float) -> int:
        return max(self.config.min_score, min(self.config.max_score, int(round(score))))

    def simulate(self, matchup: Matchup, default_score: int = DEFAULT_SPEAKER_SCORE):
        """Return (speaker_scores, ranks) for ``matchup``.

        Speaks are spread around ``default_score``, the score a ballot form
        would be pre-filled with.
        """
        teams = matchup.team_list()
        pattern = self.config.result_pattern

        if pattern == ResultPattern.RANDOM:
            order = list(teams)
            self.random.shuffle(order)
            ranks = {team.id: position for position, team in enumerate(order, start=1)}
            scores = {
                speaker.id: self.random.randint(self.config.min_score, self.config.max_score)
                for speaker in matchup.speakers()
            }
            return scores, ranks

        noise = 0.0 if pattern == ResultPattern.PREDICTABLE else 1.0
        performance = {
            team.id: self._team_strength(team.id) + self.random.gauss(0.0, noise)
            for team in teams
        }
        order = sorted(teams, key=lambda t: performance[t.id], reverse=True)
        ranks = {team.id: position for position, team in enumerate(order, start=1)}

        # Speaks follow the result: the winning team gets the higher total
        scores = {}
        for team in teams:
            base = default_score + (2.5 - ranks[team.id]) * 1.5
            for speaker in team.members:
                scores[speaker.id] = self._clamp(base + self.random.gauss(0.0, noise))
        return scores, ranks


class RandomTournamentGenerator:
    """Generates complete random BP tournaments."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )
        self.ballots = BallotSimulator(config, self.random)

    def generate_complete_tournament(self) -> Tournament:
        """Register teams and adjudicators, then draw and score every round."""
        if self.config.num_teams < TEAMS_PER_ROOM or self.config.num_teams % TEAMS_PER_ROOM:
            raise ValueError(
                f"num_teams must be a positive multiple of {TEAMS_PER_ROOM}"
            )
        rounds = validate_positive_integer(
            self.config.num_rounds, "num_rounds", allow_zero=True
        )
        if not rounds:
            raise ValueError(rounds.error_message)

        store = TournamentStore(draw_provider=RandomDrawProvider(self.random))
        store.start(
            self.config.name,
            min_speaker_score=self.config.min_score,
            max_speaker_score=self.config.max_score,
            default_speaker_score=max(
                self.config.min_score,
                min(self.config.max_score, self.config.default_score),
            ),
        )
        store.dispatch(
            QuickAddTeams(
                tuple(f"Team {number:02d}" for number in range(1, self.config.num_teams + 1))
            )
        )
        for number in range(1, max(1, self.config.num_adjudicators) + 1):
            store.dispatch(AddAdjudicator(f"Adjudicator {number:02d}"))

        for _ in range(self.config.num_rounds):
            state, _ = store.draw_next_round()
            round_data = state.rounds[-1]
            store.dispatch(
                SetMotion(round_data.round_number, f"Motion for round {round_data.round_number}")
            )
            for matchup in round_data.matchups:
                if self.random.random() >= self.config.completion_rate:
                    continue
                scores, ranks = self.ballots.simulate(
                    matchup, state.config.default_speaker_score
                )
                store.submit_ballot(round_data.round_number, matchup.id, scores, ranks)

        logger.info(
            "Generated %s: %d teams, %d rounds (%s)",
            self.config.name,
            self.config.num_teams,
            self.config.num_rounds,
            self.config.result_pattern.value,
        )
        return store.state


def create_small_tournament(seed: Optional[int] = None) -> Tournament:
    """Create a one-room, three-round tournament."""
    config = RTGConfig(num_teams=4, num_rounds=3, num_adjudicators=1, seed=seed)
    return RandomTournamentGenerator(config).generate_complete_tournament()

