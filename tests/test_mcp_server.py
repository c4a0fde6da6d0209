"""Tests for MCP server tool functions."""

import pytest

from basketprice.pricing import PricingRule
from basketprice.table import PricingTable

from basketprice.mcp.server import (
    _MAX_ITEMS,
    _TableHolder,
    _tool_calculate_total,
    _tool_get_price_table,
    _tool_price_basket,
    create_server,
)


@pytest.fixture
def holder():
    return _TableHolder(table=PricingTable.default())


class TestGetPriceTable:
    def test_lists_every_item(self, holder):
        info = _tool_get_price_table(holder)
        assert info["name"] == "Fruit Stall"
        assert [i["name"] for i in info["items"]] == ["Apple", "Banana", "Melon", "Lime"]
        assert info["items"][2]["rule"] == "buy 2 get 1 free @ 50"


class TestCalculateTotal:
    def test_total(self, holder):
        result = _tool_calculate_total(
            holder, ["Apple", "Banana", "Banana", "Melon", "Melon"]
        )
        assert result == {"total": 125, "item_count": 5}

    def test_empty(self, holder):
        assert _tool_calculate_total(holder, [])["total"] == 0

    def test_unknown_item(self, holder):
        result = _tool_calculate_total(holder, ["Apple", "Durian"])
        assert result["item"] == "Durian"
        assert "Unknown item" in result["error"]
        assert "total" not in result

    def test_too_many_items(self, holder):
        result = _tool_calculate_total(holder, ["Apple"] * (_MAX_ITEMS + 1))
        assert "error" in result

    def test_non_string_items(self, holder):
        result = _tool_calculate_total(holder, ["Apple", 3])
        assert result == {"error": "Item names must be strings"}


class TestPriceBasket:
    def test_lines(self, holder):
        result = _tool_price_basket(holder, ["Lime"] * 4 + ["Apple"])
        assert result["lines"] == [
            {"item": "Apple", "count": 1, "price": 35},
            {"item": "Lime", "count": 4, "price": 45},
        ]
        assert result["total"] == 80

    def test_unknown_item(self, holder):
        result = _tool_price_basket(holder, ["Kiwi"])
        assert result["item"] == "Kiwi"


def test_alternate_table():
    holder = _TableHolder(table=PricingTable.from_rules({"Tea": PricingRule.unit(4)}))
    assert _tool_calculate_total(holder, ["Tea", "Tea"])["total"] == 8


def test_create_server():
    server = create_server(PricingTable.default())
    assert server.name == "basketprice: Fruit Stall"
