"""Predefined drift scenarios for demos and smoke checks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Scenario:
    """A named pair of raw event versions."""

    name: str
    title: str
    v1: str
    v2: str

    def format_display(self) -> str:
        """Format scenario for display."""
        return f"{self.name}: {self.title}"


SCENARIOS: dict[str, Scenario] = {
    "scenario1": Scenario(
        name="scenario1",
        title="Partner + Promo Drift",
        v1="""{
  "partnerId": "PartnerA",
  "tier": "Gold",
  "segment": "HighValue",
  "promoCode": "SPRING10",
  "campaignId": "CAMP123",
  "score": 82,
  "spend": 120,
  "currency": "USD",
  "category": "Electronics"
}""",
        v2="""{
  "partnerId": "partner-a",
  "tier": "Platinum",
  "segment": "HighValue",
  "promoCode": "SPRING20",
  "campaignId": "CAMP123",
  "score": 76,
  "spend": 120,
  "currency": "USD",
  "category": "Electronics-Devices"
}""",
    ),
    "scenario2": Scenario(
        name="scenario2",
        title="Tier + Category Drift, milder",
        v1="""{
  "partnerId": "PartnerB",
  "tier": "Silver",
  "segment": "New",
  "promoCode": "WELCOME5",
  "campaignId": "CAMP200",
  "score": 60,
  "spend": 45,
  "currency": "USD",
  "category": "Grocery"
}""",
        v2="""{
  "partnerId": "PartnerB",
  "tier": "Gold",
  "segment": "New",
  "promoCode": "WELCOME5",
  "campaignId": "CAMP200",
  "score": 68,
  "spend": 45,
  "currency": "USD",
  "category": "Grocery-Fresh"
}""",
    ),
}

DEFAULT_SCENARIO = "scenario1"


def list_scenarios() -> list[Scenario]:
    """All scenarios in display order."""
    return list(SCENARIOS.values())


def get_scenario(name: str) -> Scenario:
    """Look up a scenario by name.

    Raises:
        KeyError: If no scenario has that name.
    """
    try:
        return SCENARIOS[name]
    except KeyError:
        raise KeyError(f"Unknown scenario: {name}") from None
