"""Drift report model for Loyalty Drift."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

Scalar = Union[str, int, float, bool, None]
Record = Mapping[str, Scalar]


class _Absent:
    """Marker for a field that is not present in a record."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class IssueKind(Enum):
    """Kind of field-level difference."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class DriftLevel(Enum):
    """Coarse severity bucket derived from the issue count."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Issue counts at which the drift level steps up
MEDIUM_THRESHOLD = 2
HIGH_THRESHOLD = 5


def level_for_count(count: int) -> DriftLevel:
    """Convert an issue count to a drift level."""
    if count >= HIGH_THRESHOLD:
        return DriftLevel.HIGH
    elif count >= MEDIUM_THRESHOLD:
        return DriftLevel.MEDIUM
    else:
        return DriftLevel.LOW


IMPACT_SENTENCES = {
    DriftLevel.LOW: "Impact: Low — small or no meaningful changes in tracked fields.",
    DriftLevel.MEDIUM: (
        "Impact: Medium — some targeting or promo behavior may shift; "
        "review before relying on historical results."
    ),
    DriftLevel.HIGH: (
        "Impact: High — expect targeting, promo eligibility, or scoring "
        "to behave differently between these versions."
    ),
}

NO_DRIFT_IMPACT = "Impact: Low — no field-level differences across the tracked keys."


def display_value(value: Any) -> str:
    """Render a record value the way it appears in JSON."""
    if value is ABSENT:
        return "<absent>"
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Issue:
    """A single field-level difference between two records."""

    field: str
    kind: IssueKind
    from_value: Any = ABSENT
    to_value: Any = ABSENT

    @property
    def message(self) -> str:
        """Human-readable description of the difference."""
        if self.kind == IssueKind.REMOVED:
            return f'Field removed in v2: {self.field} (was "{display_value(self.from_value)}")'
        elif self.kind == IssueKind.ADDED:
            return f'Field added in v2: {self.field} (now "{display_value(self.to_value)}")'
        else:
            return (
                f"Value drift in {self.field}: "
                f'v1="{display_value(self.from_value)}" → v2="{display_value(self.to_value)}"'
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert issue to dictionary for JSON serialization.

        Absent values are left out so they stay distinct from a JSON null.
        """
        data: dict[str, Any] = {"field": self.field, "kind": self.kind.value}
        if self.from_value is not ABSENT:
            data["from"] = self.from_value
        if self.to_value is not ABSENT:
            data["to"] = self.to_value
        data["message"] = self.message
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Issue":
        """Create an Issue from a dictionary."""
        return cls(
            field=data["field"],
            kind=IssueKind(data["kind"]),
            from_value=data.get("from", ABSENT),
            to_value=data.get("to", ABSENT),
        )


@dataclass(frozen=True)
class DriftReport:
    """Result of comparing two versions of a loyalty event."""

    issues: tuple[Issue, ...] = ()

    @property
    def level(self) -> DriftLevel:
        """Drift level, derived from the number of issues."""
        return level_for_count(len(self.issues))

    @property
    def has_drift(self) -> bool:
        """Returns True if any tracked field differs."""
        return bool(self.issues)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    def fields(self) -> list[str]:
        """Names of the fields that drifted, in report order."""
        return [issue.field for issue in self.issues]

    def summary_line(self) -> str:
        """One-line summary badge text."""
        if not self.issues:
            return "No drift detected for tracked fields."
        return f"Drift Level: {self.level.value} · Issues: {self.issue_count}"

    def format_result(self) -> str:
        """Format the report as plain text for display."""
        if not self.issues:
            return "\n".join(
                [
                    "No drift detected for tracked fields.",
                    "",
                    f"Drift Level: {self.level.value}",
                    "Issue Count: 0",
                    "",
                    NO_DRIFT_IMPACT,
                ]
            )

        lines = ["Drift Detected:"]
        for issue in self.issues:
            lines.append(f"- {issue.message}")
        lines.append("")
        lines.append(f"Drift Level: {self.level.value}")
        lines.append(f"Issue Count: {self.issue_count}")
        lines.append("")
        lines.append(IMPACT_SENTENCES[self.level])
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for JSON serialization."""
        return {
            "level": self.level.value,
            "issue_count": self.issue_count,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DriftReport":
        """Create a DriftReport from a dictionary.

        Any stored level is ignored; it is always derived from the issues.
        """
        return cls(issues=tuple(Issue.from_dict(i) for i in data.get("issues", [])))
