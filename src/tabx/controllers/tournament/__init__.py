from .ballot_recorder import BallotRecorder
from .reducer import (
    AddAdjudicator,
    AddParticipant,
    AddTeam,
    AppendRound,
    QuickAddTeams,
    RemoveAdjudicator,
    RemoveParticipant,
    RemoveTeam,
    SetMatchupStatus,
    SetMotion,
    SetTournamentStatus,
    SubmitBallot,
    TournamentEvent,
    apply_event,
)
from .round_manager import RoundManager
from .store import TournamentStore
from .tab_calculator import (
    TabCalculator,
    compute_speaker_standings,
    compute_team_standings,
    rank_to_points,
)

__all__ = [
    "AddAdjudicator",
    "AddParticipant",
    "AddTeam",
    "AppendRound",
    "BallotRecorder",
    "QuickAddTeams",
    "RemoveAdjudicator",
    "RemoveParticipant",
    "RemoveTeam",
    "RoundManager",
    "SetMatchupStatus",
    "SetMotion",
    "SetTournamentStatus",
    "SubmitBallot",
    "TabCalculator",
    "TournamentEvent",
    "TournamentStore",
    "apply_event",
    "compute_speaker_standings",
    "compute_team_standings",
    "rank_to_points",
]
