"""Configuration model for Loyalty Drift."""

from dataclasses import dataclass, field
from typing import Any

# Fields compared on every loyalty event, in report order
DEFAULT_TRACKED_FIELDS = (
    "partnerId",
    "tier",
    "segment",
    "promoCode",
    "campaignId",
    "score",
    "spend",
    "currency",
    "category",
)


@dataclass
class DriftConfig:
    """Loyalty Drift project configuration."""

    version: str = "0.1"
    tracked_fields: list[str] = field(default_factory=lambda: list(DEFAULT_TRACKED_FIELDS))

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "tracked_fields": list(self.tracked_fields),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DriftConfig":
        """Create a DriftConfig from a dictionary."""
        tracked = data.get("tracked_fields")
        return cls(
            version=data.get("version", "0.1"),
            tracked_fields=list(tracked) if tracked is not None else list(DEFAULT_TRACKED_FIELDS),
        )
