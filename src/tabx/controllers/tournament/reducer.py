"""Tournament events and the reducer that applies them.

Every change to a tournament is an event. ``apply_event(state, event)``
returns the next snapshot and leaves ``state`` as it was. Invalid events
raise and produce no snapshot at all.
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

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Mapping, Optional, Tuple, Type

from tabx.constants import QUICK_SPEAKER_NAME
from tabx.controllers.tournament.ballot_recorder import BallotRecorder
from tabx.controllers.tournament.round_manager import RoundManager
from tabx.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidEntityException,
    ParticipantAlreadyOnTeamException,
    ParticipantInTeamException,
    TournamentStateException,
)
from tabx.models.enums import MatchupStatus, TournamentStatus
from tabx.models.participant import Adjudicator, Participant, Team
from tabx.models.tournament import RoundData, Tournament
from tabx.utils import setup_logger
from tabx.utils.validation import validate_name

logger = setup_logger(__name__)


# ========== Events ==========


class TournamentEvent:
    """Base class of all events."""


@dataclass(frozen=True)
class AddParticipant(TournamentEvent):
    name: str
    participant_id: Optional[str] = None


@dataclass(frozen=True)
class RemoveParticipant(TournamentEvent):
    participant_id: str


@dataclass(frozen=True)
class AddAdjudicator(TournamentEvent):
    name: str
    adjudicator_id: Optional[str] = None


@dataclass(frozen=True)
class RemoveAdjudicator(TournamentEvent):
    adjudicator_id: str


@dataclass(frozen=True)
class AddTeam(TournamentEvent):
    name: str
    member_ids: Tuple[str, str]
    team_id: Optional[str] = None


@dataclass(frozen=True)
class RemoveTeam(TournamentEvent):
    team_id: str


@dataclass(frozen=True)
class QuickAddTeams(TournamentEvent):
    """Create each named team together with two placeholder speakers."""

    names: Tuple[str, ...]


@dataclass(frozen=True)
class AppendRound(TournamentEvent):
    round: RoundData


@dataclass(frozen=True)
class SetMotion(TournamentEvent):
    round_number: int
    motion: str


@dataclass(frozen=True)
class SetMatchupStatus(TournamentEvent):
    round_number: int
    matchup_id: str
    status: MatchupStatus


@dataclass(frozen=True)
class SubmitBallot(TournamentEvent):
    round_number: int
    matchup_id: str
    speaker_scores: Mapping[str, int] = field(default_factory=dict)
    ranks: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class SetTournamentStatus(TournamentEvent):
    status: TournamentStatus


# ========== Handlers ==========


def _require_name(name: str, kind: str) -> str:
    result = validate_name(name)
    if not result:
        raise InvalidEntityException(f"{kind} name: {result.error_message}")
    return result.sanitized_value


def _check_unique_id(existing, new_id: str, kind: str) -> None:
    if any(item.id == new_id for item in existing):
        raise DuplicateEntityException(f"{kind} {new_id} already exists")


def _add_participant(state: Tournament, event: AddParticipant) -> Tournament:
    name = _require_name(event.name, "Participant")
    participant = (
        Participant(id=event.participant_id, name=name)
        if event.participant_id
        else Participant.create(name)
    )
    _check_unique_id(state.participants, participant.id, "Participant")
    return replace(state, participants=state.participants + (participant,))


def _remove_participant(state: Tournament, event: RemoveParticipant) -> Tournament:
    if state.get_participant(event.participant_id) is None:
        raise EntityNotFoundException(f"Participant {event.participant_id} not found")
    team = state.team_for_participant(event.participant_id)
    if team is not None:
        raise ParticipantInTeamException(event.participant_id, team.name)
    return replace(
        state,
        participants=tuple(p for p in state.participants if p.id != event.participant_id),
    )


def _add_adjudicator(state: Tournament, event: AddAdjudicator) -> Tournament:
    name = _require_name(event.name, "Adjudicator")
    adjudicator = (
        Adjudicator(id=event.adjudicator_id, name=name)
        if event.adjudicator_id
        else Adjudicator.create(name)
    )
    _check_unique_id(state.adjudicators, adjudicator.id, "Adjudicator")
    return replace(state, adjudicators=state.adjudicators + (adjudicator,))


def _remove_adjudicator(state: Tournament, event: RemoveAdjudicator) -> Tournament:
    if state.get_adjudicator(event.adjudicator_id) is None:
        raise EntityNotFoundException(f"Adjudicator {event.adjudicator_id} not found")
    return replace(
        state,
        adjudicators=tuple(
            a for a in state.adjudicators if a.id != event.adjudicator_id
        ),
    )


def _add_team(state: Tournament, event: AddTeam) -> Tournament:
    name = _require_name(event.name, "Team")
    if len(event.member_ids) != 2 or event.member_ids[0] == event.member_ids[1]:
        raise InvalidEntityException(
            f"Team '{name}' needs two different members"
        )

    members = []
    for participant_id in event.member_ids:
        participant = state.get_participant(participant_id)
        if participant is None:
            raise EntityNotFoundException(f"Participant {participant_id} not found")
        current = state.team_for_participant(participant_id)
        if current is not None:
            raise ParticipantAlreadyOnTeamException(
                f"{participant.name} already speaks for '{current.name}'"
            )
        members.append(participant)

    team = (
        Team(id=event.team_id, name=name, members=(members[0], members[1]))
        if event.team_id
        else Team.create(name, members[0], members[1])
    )
    _check_unique_id(state.teams, team.id, "Team")
    if state.find_team_by_name(name) is not None:
        raise DuplicateEntityException(f"A team named '{name}' already exists")
    return replace(state, teams=state.teams + (team,))


def _remove_team(state: Tournament, event: RemoveTeam) -> Tournament:
    if state.get_team(event.team_id) is None:
        raise EntityNotFoundException(f"Team {event.team_id} not found")
    return replace(state, teams=tuple(t for t in state.teams if t.id != event.team_id))


def _quick_add_teams(state: Tournament, event: QuickAddTeams) -> Tournament:
    participants = list(state.participants)
    teams = list(state.teams)
    for raw_name in event.names:
        result = validate_name(raw_name, required=False)
        if not result.sanitized_value:
            continue
        name = result.sanitized_value
        if any(t.name == name for t in teams):
            raise DuplicateEntityException(f"A team named '{name}' already exists")
        first = Participant.create(QUICK_SPEAKER_NAME.format(number=1, team=name))
        second = Participant.create(QUICK_SPEAKER_NAME.format(number=2, team=name))
        participants.extend((first, second))
        teams.append(Team.create(name, first, second))
    return replace(state, participants=tuple(participants), teams=tuple(teams))


def _append_round(state: Tournament, event: AppendRound) -> Tournament:
    return RoundManager().append_round(state, event.round)


def _set_motion(state: Tournament, event: SetMotion) -> Tournament:
    return RoundManager().set_motion(state, event.round_number, event.motion)


def _set_matchup_status(state: Tournament, event: SetMatchupStatus) -> Tournament:
    return RoundManager().set_matchup_status(
        state, event.round_number, event.matchup_id, event.status
    )


def _submit_ballot(state: Tournament, event: SubmitBallot) -> Tournament:
    return BallotRecorder().submit_ballot(
        state,
        event.round_number,
        event.matchup_id,
        event.speaker_scores,
        event.ranks,
    )


def _set_tournament_status(state: Tournament, event: SetTournamentStatus) -> Tournament:
    return replace(state, status=event.status)


_HANDLERS: Dict[Type[TournamentEvent], Callable[[Tournament, TournamentEvent], Tournament]] = {
    AddParticipant: _add_participant,
    RemoveParticipant: _remove_participant,
    AddAdjudicator: _add_adjudicator,
    RemoveAdjudicator: _remove_adjudicator,
    AddTeam: _add_team,
    RemoveTeam: _remove_team,
    QuickAddTeams: _quick_add_teams,
    AppendRound: _append_round,
    SetMotion: _set_motion,
    SetMatchupStatus: _set_matchup_status,
    SubmitBallot: _submit_ballot,
    SetTournamentStatus: _set_tournament_status,
}


def apply_event(state: Tournament, event: TournamentEvent) -> Tournament:
    """Apply ``event`` to ``state`` and return the next snapshot.

    Args:
        state: Current snapshot; never modified
        event: The change to make

    Returns:
        The new snapshot

    Raises:
        TournamentStateException: The tournament is finished (only a status
            change is accepted then) or the event type is unknown
        TabXException: Whatever the event's handler rejects
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TournamentStateException(f"Unknown event: {type(event).__name__}")

    if state.status == TournamentStatus.FINISHED and not isinstance(
        event, SetTournamentStatus
    ):
        raise TournamentStateException(
            f"{state.name} is finished; reopen it before making changes"
        )

    new_state = handler(state, event)
    logger.debug("Applied %s to %s", type(event).__name__, state.name)
    return new_state
