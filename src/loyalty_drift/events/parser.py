"""Parsing of raw event text into records."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..drift import compare
from ..models import DEFAULT_TRACKED_FIELDS, DriftReport

logger = logging.getLogger(__name__)


class EventParseError(ValueError):
    """One or both event versions could not be parsed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Error parsing JSON:\n" + "\n".join(f"- {e}" for e in errors))


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one side of an event pair."""

    side: str
    value: dict[str, Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe_error(self) -> str:
        """Error line naming the side that failed."""
        return f"Event {self.side}: {self.error}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_event(raw: str | None, side: str = "v1") -> ParseResult:
    """Parse raw JSON text into an event record.

    Never raises; failures are returned as a ParseResult with an error.
    """
    if raw is None or not raw.strip():
        return ParseResult(side=side, error="event is empty")

    try:
        value = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug("Event %s is not valid JSON: %s", side, e)
        return ParseResult(side=side, error=str(e))

    if not isinstance(value, dict):
        return ParseResult(
            side=side,
            error=f"expected a JSON object, got {type(value).__name__}",
        )

    return ParseResult(side=side, value=value)


@dataclass(frozen=True)
class EventPair:
    """Both versions of an event, each parsed independently."""

    v1: ParseResult
    v2: ParseResult

    @property
    def ok(self) -> bool:
        return self.v1.ok and self.v2.ok

    @property
    def errors(self) -> list[str]:
        """Error lines for every side that failed, v1 first."""
        return [r.describe_error() for r in (self.v1, self.v2) if not r.ok]

    def check(self, tracked_fields: Sequence[str] = DEFAULT_TRACKED_FIELDS) -> DriftReport:
        """Compare the two versions.

        Raises:
            EventParseError: If either side failed to parse.
        """
        if not self.ok:
            raise EventParseError(self.errors)
        return compare(self.v1.value, self.v2.value, tracked_fields)


def parse_event_pair(raw_v1: str | None, raw_v2: str | None) -> EventPair:
    """Parse both versions of an event."""
    return EventPair(v1=parse_event(raw_v1, "v1"), v2=parse_event(raw_v2, "v2"))


def check_events(
    raw_v1: str | None,
    raw_v2: str | None,
    tracked_fields: Sequence[str] = DEFAULT_TRACKED_FIELDS,
) -> DriftReport:
    """Parse two raw events and compare them.

    Raises:
        EventParseError: If either side failed to parse.
    """
    return parse_event_pair(raw_v1, raw_v2).check(tracked_fields)
