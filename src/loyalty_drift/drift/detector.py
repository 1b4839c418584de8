"""Drift detection logic for comparing two versions of a loyalty event."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..models import (
    ABSENT,
    DEFAULT_TRACKED_FIELDS,
    DriftReport,
    Issue,
    IssueKind,
    Record,
)

logger = logging.getLogger(__name__)


def values_equal(a: Any, b: Any) -> bool:
    """Strict equality with no implicit type conversion.

    Numbers compare by value (1 == 1.0), but a bool never equals a number
    and a string never equals a number.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return type(a) is type(b) and a == b


def compare_field(field_name: str, record_a: Record, record_b: Record) -> Issue | None:
    """Compare a single field across two records."""
    value_a = record_a[field_name] if field_name in record_a else ABSENT
    value_b = record_b[field_name] if field_name in record_b else ABSENT

    if value_a is ABSENT and value_b is ABSENT:
        return None
    if value_b is ABSENT:
        return Issue(field=field_name, kind=IssueKind.REMOVED, from_value=value_a)
    if value_a is ABSENT:
        return Issue(field=field_name, kind=IssueKind.ADDED, to_value=value_b)
    if not values_equal(value_a, value_b):
        return Issue(
            field=field_name,
            kind=IssueKind.CHANGED,
            from_value=value_a,
            to_value=value_b,
        )
    return None


def compare(
    record_a: Record,
    record_b: Record,
    tracked_fields: Sequence[str] = DEFAULT_TRACKED_FIELDS,
) -> DriftReport:
    """
    Compare two records over the tracked fields.

    Fields outside ``tracked_fields`` are ignored. Issues are reported in
    ``tracked_fields`` order and the level is derived from their count.
    """
    issues = []
    for field_name in tracked_fields:
        issue = compare_field(field_name, record_a, record_b)
        if issue is not None:
            issues.append(issue)

    report = DriftReport(issues=tuple(issues))
    logger.debug(
        "Compared %d tracked fields: %d issues (%s)",
        len(tracked_fields),
        len(issues),
        report.level.value,
    )
    return report


class DriftComparator:
    """Compares loyalty events over a configured set of tracked fields."""

    def __init__(self, tracked_fields: Sequence[str] | None = None):
        """Initialize with the fields to track.

        Args:
            tracked_fields: Ordered field names. Defaults to the loyalty event fields.
        """
        fields = DEFAULT_TRACKED_FIELDS if tracked_fields is None else tracked_fields
        self.tracked_fields = tuple(fields)

    def check_drift(self, record_a: Record, record_b: Record) -> DriftReport:
        """Compare two versions of an event and return a drift report."""
        return compare(record_a, record_b, self.tracked_fields)
