"""Tests for table module."""
import pytest

from basketprice.errors import PricingError, UnknownItemError
from basketprice.pricing import PricingRule
from basketprice.table import PriceEntry, PricingTable


def test_default_table_rules():
    table = PricingTable.default()
    assert table.price("Apple", 3) == 105
    assert table.price("Banana", 3) == 60
    assert table.price("Melon", 3) == 100
    assert table.price("Lime", 4) == 45
    assert table.validate() == []


def test_lookup_returns_rule():
    table = PricingTable.default()
    rule = table.lookup("Melon")
    assert rule(2) == 50


def test_lookup_unknown_item():
    table = PricingTable.default()
    with pytest.raises(UnknownItemError) as exc_info:
        table.lookup("Durian")
    assert exc_info.value.item == "Durian"
    assert "Durian" in str(exc_info.value)


def test_unknown_item_is_key_error_and_pricing_error():
    table = PricingTable.default()
    with pytest.raises(KeyError):
        table.lookup("Kiwi")
    with pytest.raises(PricingError):
        table.price("Kiwi", 1)


def test_container_protocol():
    table = PricingTable.default()
    assert len(table) == 4
    assert "Apple" in table
    assert "Kiwi" not in table
    assert list(table) == ["Apple", "Banana", "Melon", "Lime"]
    assert dict(table.items())["Lime"].description == "buy 3 get 1 free @ 15"


def test_table_is_read_only():
    table = PricingTable.default()
    with pytest.raises(AttributeError):
        table.name = "Other"
    with pytest.raises(TypeError):
        table._by_name["Kiwi"] = PricingRule.unit(1)


def test_from_rules():
    table = PricingTable.from_rules({"Pear": PricingRule.unit(12)}, name="Pears")
    assert table.name == "Pears"
    assert table.price("Pear", 2) == 24


def test_validate_duplicate_names():
    table = PricingTable(
        (PriceEntry("Apple", PricingRule.unit(35)), PriceEntry("Apple", PricingRule.unit(30)))
    )
    assert "Duplicate item name: 'Apple'" in table.validate()


def test_validate_bad_rules():
    table = PricingTable(
        (
            PriceEntry("", PricingRule.unit(1)),
            PriceEntry("Free lunch", PricingRule.custom(lambda count: 5)),
            PriceEntry("Refund", PricingRule.unit(-10)),
        )
    )
    errors = table.validate()
    assert "Empty item name" in errors
    assert "Item 'Free lunch' charges for an empty count" in errors
    assert any(
        err.startswith("Item 'Refund' pricing rule failed:") and "non-negative" in err
        for err in errors
    )


def test_validate_reports_rule_that_raises():
    table = PricingTable((PriceEntry("Odd", PricingRule.custom(lambda count: 10 // count)),))
    errors = table.validate()
    assert len(errors) == 1
    assert errors[0].startswith("Item 'Odd' pricing rule failed:")
