"""Fruit stall pricing table, usable with --table-module examples.fruit_stall."""
from __future__ import annotations

from basketprice.pricing import PricingRule
from basketprice.table import PriceEntry, PricingTable


def define_table() -> PricingTable:
    return PricingTable(
        name="Fruit Stall",
        entries=(
            PriceEntry("Apple", PricingRule.unit(35)),
            PriceEntry("Banana", PricingRule.unit(20)),
            PriceEntry("Melon", PricingRule.buy_k_get_one_free(2, 50)),
            PriceEntry("Lime", PricingRule.buy_k_get_one_free(3, 15)),
            # Every fourth pack is free, capped at 200 for any quantity
            PriceEntry(
                "Cherry",
                PricingRule.custom(
                    lambda count: min((count - count // 4) * 60, 200),
                    description="buy 4 get 1 free @ 60, max 200",
                ),
            ),
        ),
    )
