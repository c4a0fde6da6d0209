"""MCP server exposing basket pricing to AI assistants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from basketprice.basket import Basket
from basketprice.errors import UnknownItemError
from basketprice.table import PricingTable

# Maximum item names per basket call
_MAX_ITEMS = 10000


@dataclass
class _TableHolder:
    """Holds the pricing table the tools price against."""

    table: PricingTable


def _check_items(items: list[str]) -> str | None:
    if len(items) > _MAX_ITEMS:
        return f"Basket cannot hold more than {_MAX_ITEMS} items"
    if not all(isinstance(i, str) for i in items):
        return "Item names must be strings"
    return None


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_price_table(holder: _TableHolder) -> dict[str, Any]:
    return {
        "name": holder.table.name,
        "items": [
            {"name": name, "rule": rule.description}
            for name, rule in holder.table.items()
        ],
    }


def _tool_calculate_total(holder: _TableHolder, items: list[str]) -> dict[str, Any]:
    error = _check_items(items)
    if error:
        return {"error": error}
    try:
        total = Basket.from_items(items).total(holder.table)
    except UnknownItemError as e:
        return {"error": str(e), "item": e.item}
    return {"total": total, "item_count": len(items)}


def _tool_price_basket(holder: _TableHolder, items: list[str]) -> dict[str, Any]:
    error = _check_items(items)
    if error:
        return {"error": error}
    try:
        priced = Basket.from_items(items).price(holder.table)
    except UnknownItemError as e:
        return {"error": str(e), "item": e.item}
    return {
        "lines": [
            {"item": line.item, "count": line.count, "price": line.price}
            for line in priced.lines
        ],
        "total": priced.total,
    }


# ── Server factory ──────────────────────────────────────────────────


def create_server(table: PricingTable) -> FastMCP:
    """Create an MCP server pricing baskets against the given table."""
    holder = _TableHolder(table=table)

    mcp = FastMCP(
        name=f"basketprice: {table.name}",
    )

    @mcp.tool()
    def get_price_table() -> dict[str, Any]:
        """List every known item with a description of its pricing rule."""
        return _tool_get_price_table(holder)

    @mcp.tool()
    def calculate_total(items: list[str]) -> dict[str, Any]:
        """Total price of a basket given as a list of item names (repeats allowed)."""
        return _tool_calculate_total(holder, items)

    @mcp.tool()
    def price_basket(items: list[str]) -> dict[str, Any]:
        """Itemized price of a basket: count and price per distinct item, plus total."""
        return _tool_price_basket(holder, items)

    return mcp
