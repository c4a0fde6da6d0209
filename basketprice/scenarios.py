from __future__ import annotations

from dataclasses import dataclass

from basketprice.basket import calculate_total
from basketprice.errors import UnknownItemError
from basketprice.table import PricingTable


@dataclass(frozen=True)
class Scenario:
    """A literal basket and the total it must come to."""

    name: str
    items: tuple[str, ...]
    expected_total: int


@dataclass
class ScenarioResult:
    scenario: Scenario
    actual: int | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.scenario.expected_total


REFERENCE_SCENARIOS: tuple[Scenario, ...] = (
    Scenario("list1", ("Apple", "Apple", "Banana"), 90),
    Scenario("list2", ("Apple", "Banana", "Banana", "Melon", "Melon"), 125),
    Scenario(
        "list3",
        ("Apple", "Banana", "Banana", "Melon", "Melon", "Melon",
         "Lime", "Lime", "Lime", "Lime"),
        220,
    ),
    Scenario(
        "list4",
        ("Banana", "Melon", "Banana", "Lime", "Apple", "Apple",
         "Melon", "Melon", "Melon", "Banana", "Lime", "Lime"),
        260,
    ),
    Scenario(
        "list5",
        ("Melon", "Lime", "Melon", "Lime", "Melon", "Lime", "Melon", "Lime"),
        145,
    ),
    Scenario("list6", (), 0),
    Scenario("list7", ("Lime",), 15),
)


def run_scenarios(
    scenarios: tuple[Scenario, ...] | list[Scenario] = REFERENCE_SCENARIOS,
    table: PricingTable | None = None,
) -> list[ScenarioResult]:
    """Price every scenario basket and compare against its expected total."""
    if table is None:
        table = PricingTable.default()
    results: list[ScenarioResult] = []
    for scenario in scenarios:
        try:
            actual = calculate_total(scenario.items, table)
        except UnknownItemError as e:
            results.append(ScenarioResult(scenario, error=str(e)))
        else:
            results.append(ScenarioResult(scenario, actual=actual))
    return results
