from __future__ import annotations

from basketprice.basket import PricedBasket
from basketprice.scenarios import ScenarioResult
from basketprice.table import PricingTable


def format_receipt(priced: PricedBasket) -> str:
    """Format an itemized basket for console output."""
    lines: list[str] = []
    if not priced.lines:
        lines.append("  (empty basket)")
    for line in priced.lines:
        label = f"{line.item} x{line.count}"
        lines.append(f"  {label:.<30s} {line.price:>8d}")
    lines.append("-" * 41)
    lines.append(f"  {'TOTAL':<30s} {priced.total:>8d}")
    return "\n".join(lines)


def format_table(table: PricingTable) -> str:
    lines = [f"{table.name}:"]
    for name, rule in table.items():
        lines.append(f"  {name:.<20s} {rule.description}")
    return "\n".join(lines)


def format_scenario_results(results: list[ScenarioResult]) -> str:
    lines: list[str] = []
    for r in results:
        status = "PASSED" if r.passed else "NOT PASSED"
        line = f"Test with {r.scenario.name} {status}"
        if r.error is not None:
            line += f" ({r.error})"
        elif not r.passed:
            line += f" (expected {r.scenario.expected_total}, got {r.actual})"
        lines.append(line)

    failed = sum(1 for r in results if not r.passed)
    lines.append("")
    if failed:
        lines.append(f"SUMMARY: {failed}/{len(results)} scenario(s) failed")
    else:
        lines.append(f"SUMMARY: All {len(results)} scenarios passed")
    return "\n".join(lines)
