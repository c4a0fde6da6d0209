# basketprice — Basket Pricing with Quantity Discounts

from basketprice.errors import PricingError, UnknownItemError, ConfigError
from basketprice.pricing import PricingRule, PriceFn
from basketprice.table import PricingTable, PriceEntry
from basketprice.basket import Basket, PriceLine, PricedBasket, calculate_total
from basketprice.config import table_from_mapping, load_table, load_table_module
from basketprice.scenarios import (
    Scenario,
    ScenarioResult,
    REFERENCE_SCENARIOS,
    run_scenarios,
)
from basketprice.formatting import format_receipt, format_table, format_scenario_results

__all__ = [
    # Errors
    "PricingError",
    "UnknownItemError",
    "ConfigError",
    # Pricing
    "PricingRule",
    "PriceFn",
    "PricingTable",
    "PriceEntry",
    # Basket
    "Basket",
    "PriceLine",
    "PricedBasket",
    "calculate_total",
    # Config
    "table_from_mapping",
    "load_table",
    "load_table_module",
    # Scenarios
    "Scenario",
    "ScenarioResult",
    "REFERENCE_SCENARIOS",
    "run_scenarios",
    # Formatting
    "format_receipt",
    "format_table",
    "format_scenario_results",
]
