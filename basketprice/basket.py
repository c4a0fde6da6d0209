from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from basketprice.pricing import _check_count
from basketprice.table import PricingTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceLine:
    """Price charged for every unit of one item in a basket."""

    item: str
    count: int
    price: int


@dataclass
class PricedBasket:
    """Itemized result of pricing a basket."""

    lines: list[PriceLine] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(line.price for line in self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.count for line in self.lines)


class Basket:
    """Multiset of item names, reduced to a count per distinct name."""

    def __init__(self, counts: dict[str, int] | None = None) -> None:
        self._counts: Counter[str] = Counter()
        for name, count in (counts or {}).items():
            self.add(name, count)

    @classmethod
    def from_items(cls, items: Iterable[str]) -> Basket:
        basket = cls()
        basket._counts.update(items)
        return basket

    def add(self, name: str, count: int = 1) -> None:
        _check_count(count)
        if count:
            self._counts[name] += count

    def count(self, name: str) -> int:
        return self._counts.get(name, 0)

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Basket):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"Basket({dict(sorted(self._counts.items()))!r})"

    def price(self, table: PricingTable) -> PricedBasket:
        """Price each distinct item. Any unknown item aborts the whole basket."""
        lines = [
            PriceLine(name, count, table.price(name, count))
            for name, count in sorted(self._counts.items())
        ]
        priced = PricedBasket(lines)
        logger.debug(
            "Priced %d item(s) across %d line(s): total %d",
            priced.item_count, len(lines), priced.total,
        )
        return priced

    def total(self, table: PricingTable) -> int:
        return sum(table.price(name, count) for name, count in self._counts.items())


def calculate_total(items: Iterable[str], table: PricingTable | None = None) -> int:
    """Total price of a sequence of item names under the given table.

    Item order has no effect; repeated names anywhere in the sequence count
    towards the same item. An empty sequence costs 0. Falls back to
    PricingTable.default() when no table is given.
    """
    if isinstance(items, str):
        raise TypeError("items must be a sequence of item names, not a single str")
    if table is None:
        table = PricingTable.default()
    return Basket.from_items(items).total(table)
