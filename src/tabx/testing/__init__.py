"""Testing module for TabX.

This module provides testing functionality including:
- Random Tournament Generator (RTG)
- Tab printing for stored tournaments
- Ballot validation of stored tournaments

Use the unified CLI: tabx-test
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

from tabx.testing.rtg import (
    BallotSimulator,
    RandomDrawProvider,
    RandomTournamentGenerator,
    ResultPattern,
    RTGConfig,
)

__all__ = [
    "BallotSimulator",
    "RandomDrawProvider",
    "RandomTournamentGenerator",
    "RTGConfig",
    "ResultPattern",
]
