"""Tab audit - re-checking the stored ballots of a tournament.

Ballots are validated when submitted, but a tournament loaded from a file
may hold anything. The auditor re-runs the submission checks on every
stored ballot. It also checks that room statuses agree with ballot presence
and that team membership is consistent.
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

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from tabx.controllers.tournament import BallotRecorder
from tabx.exceptions import BallotException
from tabx.models.enums import MatchupStatus
from tabx.models.tournament import Tournament, derive_round_status
from tabx.utils import setup_logger

logger = setup_logger(__name__)


class ViolationType(Enum):
    """How serious an audit finding is."""

    BALLOT = "BALLOT"  # Stored ballot would be rejected at submission
    STATE = "STATE"  # Status and data disagree
    WARNING = "WARNING"  # Suspicious but tabulated as-is


@dataclass
class AuditFinding:
    """A single audit finding."""

    violation_type: ViolationType
    description: str
    round_number: Optional[int] = None
    matchup_id: Optional[str] = None

    @property
    def location(self) -> str:
        if self.round_number is None:
            return "tournament"
        if self.matchup_id is None:
            return f"round {self.round_number}"
        return f"round {self.round_number}, matchup {self.matchup_id}"

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.violation_type.value,
            "location": self.location,
            "description": self.description,
        }


@dataclass
class AuditReport:
    """Complete audit report for a tournament."""

    ballots_checked: int = 0
    findings: List[AuditFinding] = field(default_factory=list)

    @property
    def violations(self) -> List[AuditFinding]:
        return [f for f in self.findings if f.violation_type != ViolationType.WARNING]

    @property
    def warnings(self) -> List[AuditFinding]:
        return [f for f in self.findings if f.violation_type == ViolationType.WARNING]

    @property
    def is_clean(self) -> bool:
        return not self.violations

    @property
    def summary(self) -> str:
        return (
            f"{self.ballots_checked} ballots checked, "
            f"{len(self.violations)} violations, {len(self.warnings)} warnings"
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "ballots_checked": self.ballots_checked,
            "summary": self.summary,
            "findings": [f.to_dict() for f in self.findings],
        }


class TabAuditor:
    """Checks a tournament snapshot for data the tab should not trust."""

    def __init__(self) -> None:
        self.recorder = BallotRecorder()

    def audit(self, tournament: Tournament) -> AuditReport:
        report = AuditReport()
        self._check_membership(tournament, report)

        for round_data in tournament.rounds:
            expected = derive_round_status(round_data.matchups)
            if round_data.status != expected:
                report.findings.append(
                    AuditFinding(
                        ViolationType.STATE,
                        f"Round status is {round_data.status.value}, rooms say "
                        f"{expected.value}",
                        round_data.round_number,
                    )
                )

            for matchup in round_data.matchups:
                where = (round_data.round_number, matchup.id)
                has_ballot = matchup.ballot is not None
                is_completed = matchup.status == MatchupStatus.COMPLETED
                if has_ballot != is_completed:
                    report.findings.append(
                        AuditFinding(
                            ViolationType.STATE,
                            f"Status {matchup.status.value} but ballot "
                            f"{'present' if has_ballot else 'absent'}",
                            *where,
                        )
                    )
                if not has_ballot:
                    continue

                report.ballots_checked += 1
                try:
                    self.recorder.validate_ballot(
                        matchup,
                        matchup.ballot.speaker_scores,
                        matchup.ballot.ranks,
                        config=tournament.config,
                    )
                except BallotException as e:
                    report.findings.append(
                        AuditFinding(ViolationType.BALLOT, str(e), *where)
                    )

                unregistered = [
                    team.name
                    for team in matchup.team_list()
                    if tournament.get_team(team.id) is None
                ]
                if unregistered:
                    report.findings.append(
                        AuditFinding(
                            ViolationType.WARNING,
                            "Teams no longer registered, left out of the team tab: "
                            + ", ".join(unregistered),
                            *where,
                        )
                    )

        logger.info("Audit of %s: %s", tournament.name, report.summary)
        return report

    def _check_membership(self, tournament: Tournament, report: AuditReport) -> None:
        seen: Dict[str, str] = {}
        for team in tournament.teams:
            for member in team.members:
                if tournament.get_participant(member.id) is None:
                    report.findings.append(
                        AuditFinding(
                            ViolationType.STATE,
                            f"Team '{team.name}' references unregistered "
                            f"participant {member.id}",
                        )
                    )
                if member.id in seen:
                    report.findings.append(
                        AuditFinding(
                            ViolationType.STATE,
                            f"{member.name} is on both '{seen[member.id]}' and "
                            f"'{team.name}'",
                        )
                    )
                seen[member.id] = team.name


def create_tab_auditor() -> TabAuditor:
    """Factory function to create a tab auditor."""
    return TabAuditor()
