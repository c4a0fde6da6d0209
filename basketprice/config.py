"""Build pricing tables from configuration data.

Tables can come from a YAML or JSON file, an already parsed mapping, or a
Python module exposing ``define_table()``. File layout::

    name: Fruit Stall
    items:
      - name: Apple
        unit_price: 35
      - name: Melon
        unit_price: 50
        buy: 2        # buy 2 get 1 free
"""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from basketprice.errors import ConfigError
from basketprice.pricing import PricingRule
from basketprice.table import PriceEntry, PricingTable

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _require_int(item: Mapping[str, Any], key: str, default: int | None = None) -> int:
    value = item.get(key, default)
    if value is None:
        raise ConfigError(f"Item {item.get('name')!r} is missing {key!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Item {item.get('name')!r} has non-integer {key!r}: {value!r}")
    return value


def _entry_from_mapping(item: Any) -> PriceEntry:
    if not isinstance(item, Mapping):
        raise ConfigError(f"Item entry must be a mapping, got {item!r}")
    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"Item entry has no name: {item!r}")

    unit_price = _require_int(item, "unit_price")
    if unit_price < 0:
        raise ConfigError(f"Item {name!r} has negative unit_price: {unit_price}")
    buy = _require_int(item, "buy", default=1)
    if buy < 1:
        raise ConfigError(f"Item {name!r} has buy < 1: {buy}")

    return PriceEntry(name, PricingRule.buy_k_get_one_free(buy, unit_price))


def table_from_mapping(data: Any) -> PricingTable:
    """Build a table from parsed configuration data."""
    if not isinstance(data, Mapping) or "items" not in data:
        raise ConfigError("Invalid pricing config: missing 'items' section")
    items = data["items"]
    if not isinstance(items, list):
        raise ConfigError("Invalid pricing config: 'items' must be a list")

    table = PricingTable(
        tuple(_entry_from_mapping(item) for item in items),
        name=str(data.get("name", "Untitled")),
    )
    errors = table.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    return table


def load_table(config_path: str | Path) -> PricingTable:
    """Load a pricing table from a YAML or JSON file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If the file content is not a valid table
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Pricing config not found: {path}")

    with open(path) as f:
        try:
            if path.suffix.lower() in _YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e

    table = table_from_mapping(data)
    logger.info("Loaded %d pricing rule(s) from %s", len(table), path)
    return table


def load_table_module(module_path: str) -> PricingTable:
    """Import module and call define_table()."""
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_table"):
        raise ConfigError(f"Module {module_path!r} has no define_table() function")
    table = mod.define_table()
    if not isinstance(table, PricingTable):
        raise ConfigError(
            f"{module_path}.define_table() returned {type(table).__name__}, "
            "expected PricingTable"
        )
    errors = table.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    logger.info("Loaded %d pricing rule(s) from module %s", len(table), module_path)
    return table
