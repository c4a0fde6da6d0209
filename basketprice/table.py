from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

from basketprice.errors import UnknownItemError
from basketprice.pricing import PricingRule


@dataclass(frozen=True)
class PriceEntry:
    """Pricing rule for one item name."""

    name: str
    rule: PricingRule


@dataclass(frozen=True)
class PricingTable:
    """Read-only lookup from item name to its pricing rule."""

    entries: tuple[PriceEntry, ...] = ()
    name: str = "Untitled"

    # Lookup dict built in __post_init__
    _by_name: Mapping[str, PricingRule] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(
            self, "_by_name", MappingProxyType({e.name: e.rule for e in self.entries})
        )

    @classmethod
    def from_rules(cls, rules: Mapping[str, PricingRule], name: str = "Untitled") -> PricingTable:
        return cls(tuple(PriceEntry(n, r) for n, r in rules.items()), name=name)

    @classmethod
    def default(cls) -> PricingTable:
        """The fruit stall reference table."""
        return cls.from_rules(
            {
                "Apple": PricingRule.unit(35),
                "Banana": PricingRule.unit(20),
                "Melon": PricingRule.buy_k_get_one_free(2, 50),
                "Lime": PricingRule.buy_k_get_one_free(3, 15),
            },
            name="Fruit Stall",
        )

    def lookup(self, name: str) -> PricingRule:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownItemError(name) from None

    def price(self, name: str, count: int) -> int:
        return self.lookup(name)(count)

    def items(self) -> Iterator[tuple[str, PricingRule]]:
        return iter(self._by_name.items())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def validate(self) -> list[str]:
        """Check for common table errors. Returns list of error messages."""
        errors: list[str] = []

        seen: set[str] = set()
        for e in self.entries:
            if not e.name:
                errors.append("Empty item name")
            if e.name in seen:
                errors.append(f"Duplicate item name: {e.name!r}")
            seen.add(e.name)

        for e in self.entries:
            if not callable(e.rule):
                errors.append(f"Item {e.name!r} has no callable pricing rule")
                continue
            try:
                empty_price = e.rule(0)
                single_price = e.rule(1)
            except Exception as exc:
                errors.append(f"Item {e.name!r} pricing rule failed: {exc}")
                continue
            if empty_price != 0:
                errors.append(f"Item {e.name!r} charges for an empty count")
            if single_price < 0:
                errors.append(f"Item {e.name!r} has a negative price")

        return errors
