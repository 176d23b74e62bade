from .enums import DebateFormat, MatchupStatus, RoundStatus, TournamentStatus
from .participant import Adjudicator, Participant, Team

__all__ = [
    "Adjudicator",
    "DebateFormat",
    "MatchupStatus",
    "Participant",
    "RoundStatus",
    "Team",
    "TournamentStatus",
]
