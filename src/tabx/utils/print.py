"""
Plain-text printing of tabs and draws for the command line.
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

from typing import List, Sequence

from tabx.constants import BP_POSITIONS
from tabx.models.tournament import RoundData, SpeakerResult, TeamResult


def _table(headers: Sequence[str], rows: List[Sequence[str]]) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def fmt(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def format_team_tab(results: Sequence[TeamResult]) -> str:
    """Render the team tab as a text table."""
    if not results:
        return "No teams registered."
    rows = [
        [
            str(position),
            result.team.name,
            str(result.points),
            str(result.total_speaker_score),
            "/".join(str(count) for count in result.rank_counts),
        ]
        for position, result in enumerate(results, start=1)
    ]
    return _table(["#", "Team", "Points", "Speaks", "1st/2nd/3rd/4th"], rows)


def format_speaker_tab(results: Sequence[SpeakerResult]) -> str:
    """Render the speaker tab as a text table."""
    if not results:
        return "No speaker scores recorded yet."
    rows = [
        [
            str(position),
            result.participant.name,
            result.team_name,
            " ".join(str(score) for score in result.scores),
            str(result.total_score),
            f"{result.average_score:.2f}",
        ]
        for position, result in enumerate(results, start=1)
    ]
    return _table(["#", "Speaker", "Team", "Scores", "Total", "Average"], rows)


def format_round(round_data: RoundData) -> str:
    """Render a round's draw and room statuses."""
    header = (
        f"Round {round_data.round_number} ({round_data.status.value}, "
        f"{round_data.completed_count}/{len(round_data.matchups)} rooms scored)"
    )
    motion = round_data.motion or "(no motion set)"
    rows = [
        [matchup.room]
        + [matchup.teams[pos].name for pos in BP_POSITIONS]
        + [
            ", ".join(a.name for a in matchup.adjudicators),
            matchup.status.value,
        ]
        for matchup in round_data.matchups
    ]
    table = _table(["Room", *BP_POSITIONS, "Adjudicators", "Status"], rows)
    return f"{header}\nMotion: {motion}\n{table}"
