"""Downstream impact descriptions for drift reports."""

from ..models import DriftLevel, DriftReport, IssueKind

# Downstream areas, in display order, and the fields that feed them
AREA_FIELDS = [
    ("partner classification", {"partnerId"}),
    ("tier-based multipliers", {"tier"}),
    ("category-level targeting", {"category", "segment"}),
    ("promo eligibility & campaign mapping", {"promoCode", "campaignId"}),
    ("loyalty score & segment assignment", {"score"}),
]


def impact_summary(report: DriftReport) -> str:
    """Describe how much a report's drift is likely to matter."""
    if not report.issues:
        return "Drift impact: Low. No field-level changes detected in tracked fields."
    if report.level == DriftLevel.LOW:
        return (
            "Drift impact: Low. Small changes, unlikely to fully reshape "
            "targeting or promo behavior."
        )
    elif report.level == DriftLevel.MEDIUM:
        return (
            "Drift impact: Medium. Enough changes that some campaigns or "
            "scores may behave differently."
        )
    else:
        return (
            "Drift impact: High. Multiple core fields shifted; expect targeting, "
            "eligibility, or scoring to diverge between versions."
        )


def fields_by_kind(report: DriftReport) -> dict[str, list[str]]:
    """Group drifted field names by issue kind.

    Kinds with no issues are left out.
    """
    groups: dict[str, list[str]] = {}
    for kind in (IssueKind.ADDED, IssueKind.REMOVED, IssueKind.CHANGED):
        names = [i.field for i in report.issues if i.kind == kind]
        if names:
            groups[kind.value] = names
    return groups


def affected_areas(report: DriftReport) -> list[str]:
    """List the downstream areas touched by the drifted fields."""
    drifted = set(report.fields())
    return [area for area, fields in AREA_FIELDS if drifted & fields]


def targeting_summary(report: DriftReport) -> str:
    """Describe which targeting behavior the drift is likely to affect."""
    if not report.issues:
        return (
            "Targeting, promotions, and scores are likely to stay aligned "
            "across versions for tracked fields."
        )
    areas = affected_areas(report)
    if not areas:
        return "Drift is present but does not touch core targeting or scoring fields."
    return f"Drift is likely to affect: {', '.join(areas)}."
