from __future__ import annotations

from typing import Callable

PriceFn = Callable[[int], int]


def _check_count(count: int) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Count must be non-negative, got {count}")


def _check_price(price: int, count: int) -> int:
    if isinstance(price, bool) or not isinstance(price, int):
        raise ValueError(f"Price for count {count} must be an integer, got {price!r}")
    if price < 0:
        raise ValueError(f"Price for count {count} must be non-negative, got {price}")
    return price


class PricingRule:
    """Maps the number of units of one item to the price charged for them."""

    def __init__(self, fn: PriceFn, description: str = "custom") -> None:
        self._fn = fn
        self.description = description

    def compute(self, count: int) -> int:
        _check_count(count)
        return _check_price(self._fn(count), count)

    def __call__(self, count: int) -> int:
        return self.compute(count)

    def __repr__(self) -> str:
        return f"PricingRule({self.description!r})"

    @classmethod
    def unit(cls, unit_price: int) -> PricingRule:
        """Price = count * unit_price."""
        price = unit_price  # capture

        return cls(lambda count: count * price, f"{price} each")

    @classmethod
    def buy_k_get_one_free(cls, k: int, unit_price: int) -> PricingRule:
        """Every k-th unit is free: price = (count - count // k) * unit_price.

        k=1 charges for every unit, the same as unit().
        """
        if k < 1:
            raise ValueError(f"Discount threshold must be at least 1, got {k}")
        if k == 1:
            return cls.unit(unit_price)
        price = unit_price

        def _compute(count: int) -> int:
            return (count - count // k) * price

        return cls(_compute, f"buy {k} get 1 free @ {price}")

    @classmethod
    def custom(cls, fn: PriceFn, description: str = "custom") -> PricingRule:
        """Arbitrary pricing function."""
        return cls(fn, description)
