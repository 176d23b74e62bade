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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# BP positions, in speaking order
POSITION_OG = "OG"
POSITION_OO = "OO"
POSITION_CG = "CG"
POSITION_CO = "CO"
BP_POSITIONS = (POSITION_OG, POSITION_OO, POSITION_CG, POSITION_CO)

TEAMS_PER_ROOM = 4
SPEAKERS_PER_TEAM = 2

# Team points by rank (1 = best). Ranks outside the table score nothing.
RANK_POINTS = {
    1: 3,
    2: 2,
    3: 1,
    4: 0,
}
VALID_RANKS = frozenset(RANK_POINTS)

# Speaker score band
MIN_SPEAKER_SCORE = 69
MAX_SPEAKER_SCORE = 81
DEFAULT_SPEAKER_SCORE = 75

# Shown in the speaker tab for participants without a team
NO_TEAM = "N/A"

# Placeholder id for adjudicators the draw provider invented
UNKNOWN_ADJUDICATOR_ID = "unknown"

# Default names for quick-added teams
QUICK_SPEAKER_NAME = "Speaker {number} from {team}"
