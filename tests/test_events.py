"""Tests for event parsing and scenarios."""

import pytest

from loyalty_drift.events import (
    DEFAULT_SCENARIO,
    EventParseError,
    check_events,
    get_scenario,
    list_scenarios,
    parse_event,
    parse_event_pair,
)
from loyalty_drift.models import DriftLevel


class TestParseEvent:
    """Tests for parse_event."""

    def test_valid_object(self):
        result = parse_event('{"tier": "Gold", "score": 82}', "v1")

        assert result.ok
        assert result.value == {"tier": "Gold", "score": 82}
        assert result.error is None

    def test_invalid_json(self):
        result = parse_event('{"tier": ', "v2")

        assert not result.ok
        assert result.value is None
        assert result.describe_error().startswith("Event v2: ")

    def test_empty_text(self):
        result = parse_event("   ", "v1")

        assert not result.ok
        assert result.describe_error() == "Event v1: event is empty"

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_constants_rejected(self, constant):
        """NaN and Infinity are not JSON and fail to parse."""
        result = parse_event(f'{{"score": {constant}}}', "v1")

        assert not result.ok
        assert result.value is None
        assert constant.lstrip("-") in result.error

    def test_nan_events_not_compared(self):
        """Identical NaN-bearing events are a parse error, not a drift."""
        with pytest.raises(EventParseError) as exc_info:
            check_events('{"score": NaN}', '{"score": NaN}', ["score"])

        assert len(exc_info.value.errors) == 2

    def test_none_text(self):
        assert not parse_event(None).ok

    def test_non_object_json(self):
        """A JSON array is not an event record."""
        result = parse_event("[1, 2]", "v1")

        assert not result.ok
        assert "expected a JSON object" in result.error


class TestEventPair:
    """Tests for parsing and checking event pairs."""

    def test_both_sides_reported(self):
        """Errors on both sides are reported together, v1 first."""
        pair = parse_event_pair("{bad", "[]")

        assert not pair.ok
        assert len(pair.errors) == 2
        assert pair.errors[0].startswith("Event v1:")
        assert pair.errors[1].startswith("Event v2:")

    def test_single_side_error(self):
        pair = parse_event_pair('{"tier": "Gold"}', "nope")

        assert pair.v1.ok
        assert pair.errors == [pair.v2.describe_error()]

    def test_check_refuses_unparsed_input(self):
        """No report is produced when a side failed to parse."""
        pair = parse_event_pair("{bad", '{"tier": "Gold"}')

        with pytest.raises(EventParseError) as exc_info:
            pair.check()

        assert exc_info.value.errors == pair.errors
        assert str(exc_info.value).startswith("Error parsing JSON:\n- Event v1:")

    def test_check_events(self):
        report = check_events('{"tier": "Silver"}', '{"tier": "Gold"}', ["tier"])

        assert report.fields() == ["tier"]
        assert report.level == DriftLevel.LOW

    def test_check_events_uses_tracked_fields(self):
        report = check_events('{"a": 1, "b": 1}', '{"a": 2, "b": 2}', ["b"])
        assert report.fields() == ["b"]


class TestScenarios:
    """Tests for predefined scenarios."""

    def test_list_scenarios(self):
        names = [s.name for s in list_scenarios()]
        assert names == ["scenario1", "scenario2"]
        assert DEFAULT_SCENARIO in names

    def test_get_unknown_scenario(self):
        with pytest.raises(KeyError):
            get_scenario("scenario99")

    def test_scenario1_is_high(self):
        scenario = get_scenario("scenario1")
        report = check_events(scenario.v1, scenario.v2)

        assert report.issue_count == 5
        assert report.level == DriftLevel.HIGH

    def test_scenario2_is_medium(self):
        scenario = get_scenario("scenario2")
        report = check_events(scenario.v1, scenario.v2)

        assert report.issue_count == 3
        assert report.level == DriftLevel.MEDIUM

    def test_format_display(self):
        assert get_scenario("scenario1").format_display() == "scenario1: Partner + Promo Drift"
