"""Enumerations shared by the TabX data model."""

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

from enum import Enum


class DebateFormat(str, Enum):
    """Debate formats a tournament can be run in."""

    BP = "British Parliamentary"
    PUBLIC = "Public Debate"
    PUBLIC_SPEAKING = "Public Speaking"
    SPAR = "Sparring"


class TournamentStatus(str, Enum):
    """Lifecycle of a tournament."""

    SETUP = "setup"
    RUNNING = "running"
    FINISHED = "finished"


class RoundStatus(str, Enum):
    """Progress of a round, derived from its matchups."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class MatchupStatus(str, Enum):
    """Progress of a single room."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    SCORES_ENTERED = "Scores Entered"
    COMPLETED = "Completed"
    ISSUE = "Issue"
