"""Data models for Loyalty Drift."""

from .report import (
    ABSENT,
    DriftLevel,
    DriftReport,
    Issue,
    IssueKind,
    Record,
    Scalar,
    level_for_count,
)
from .config import DEFAULT_TRACKED_FIELDS, DriftConfig

__all__ = [
    "ABSENT",
    "DriftLevel",
    "DriftReport",
    "Issue",
    "IssueKind",
    "Record",
    "Scalar",
    "level_for_count",
    "DEFAULT_TRACKED_FIELDS",
    "DriftConfig",
]
