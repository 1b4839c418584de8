"""Drift detection for loyalty event versions."""

from ..models import level_for_count
from .detector import DriftComparator, compare, values_equal
from .impact import affected_areas, fields_by_kind, impact_summary, targeting_summary

__all__ = [
    "DriftComparator",
    "compare",
    "level_for_count",
    "values_equal",
    "affected_areas",
    "fields_by_kind",
    "impact_summary",
    "targeting_summary",
]
