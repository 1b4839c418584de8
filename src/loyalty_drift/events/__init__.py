"""Event input handling: parsing and scenario presets."""

from .parser import (
    EventPair,
    EventParseError,
    ParseResult,
    check_events,
    parse_event,
    parse_event_pair,
)
from .scenarios import DEFAULT_SCENARIO, SCENARIOS, Scenario, get_scenario, list_scenarios

__all__ = [
    "EventPair",
    "EventParseError",
    "ParseResult",
    "check_events",
    "parse_event",
    "parse_event_pair",
    "DEFAULT_SCENARIO",
    "SCENARIOS",
    "Scenario",
    "get_scenario",
    "list_scenarios",
]
