from __future__ import annotations


class PricingError(Exception):
    """Base class for basket pricing failures."""


class UnknownItemError(PricingError, KeyError):
    """Raised when a basket holds an item the pricing table does not know."""

    def __init__(self, item: str) -> None:
        super().__init__(item)
        self.item = item

    def __str__(self) -> str:
        return f"Unknown item: {self.item!r}"


class ConfigError(PricingError):
    """Pricing table configuration is malformed."""
