from .ballot import Ballot
from .matchup import Matchup
from .results import SpeakerResult, TeamResult
from .round_data import RoundData, derive_round_status
from .tournament import Tournament
from .tournament_config import TournamentConfig

__all__ = [
    "Ballot",
    "Matchup",
    "RoundData",
    "SpeakerResult",
    "TeamResult",
    "Tournament",
    "TournamentConfig",
    "derive_round_status",
]
