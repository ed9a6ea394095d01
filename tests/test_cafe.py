"""Tests for Cafe sales and restocking."""

import logging

import pytest
from pydantic import ValidationError

from campus_directory.config import Config
from campus_directory.models import Cafe, Restock


def make_cafe(coffee=100, sugar=50, cream=30, cups=20) -> Cafe:
    return Cafe(
        name="Campus Cafe",
        address="Smith College Campus Center",
        floor_count=1,
        has_elevator=False,
        coffee_ounces=coffee,
        sugar_packets=sugar,
        cream_portions=cream,
        cups=cups,
    )


class TestCreate:
    def test_stock(self):
        assert make_cafe().stock() == (100, 50, 30, 20)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            make_cafe(cups=-1)


class TestSell:
    def test_sell_from_stock(self):
        cafe = make_cafe()
        sale = cafe.sell(4, 2, 1)
        assert cafe.stock() == (96, 48, 29, 19)
        assert sale.restocked is False
        assert (sale.size, sale.sugar_packets, sale.cream_portions) == (4, 2, 1)

    def test_coffee_shortage_restocks_deficit(self, caplog):
        caplog.set_level(logging.INFO)
        cafe = make_cafe(coffee=2)
        sale = cafe.sell(4, 2, 1)
        assert sale.restock == Restock(coffee_ounces=2)
        assert cafe.stock() == (0, 48, 29, 19)
        assert "Not enough ingredients" in caplog.text

    def test_several_shortages(self):
        cafe = make_cafe(coffee=1, sugar=0, cream=5, cups=3)
        sale = cafe.sell(8, 3, 1)
        assert sale.restock == Restock(coffee_ounces=7, sugar_packets=3)
        assert cafe.stock() == (0, 0, 4, 2)

    def test_out_of_cups_uses_cup_restock(self, caplog):
        caplog.set_level(logging.INFO)
        cafe = make_cafe(cups=0)
        sale = cafe.sell(4, 2, 1)
        assert sale.restock == Restock(cups=1)
        assert cafe.stock() == (96, 48, 29, 0)
        assert "Restocked: 1 cups." in caplog.text

    def test_exact_stock_needs_no_restock(self):
        cafe = make_cafe(coffee=4, sugar=2, cream=1, cups=1)
        sale = cafe.sell(4, 2, 1)
        assert sale.restock is None
        assert cafe.stock() == (0, 0, 0, 0)

    def test_sale_is_logged(self, caplog):
        caplog.set_level(logging.INFO)
        make_cafe().sell(12, 0, 2)
        assert "Sold a coffee with 12 ounces, 0 sugar packets, and 2 cream." in caplog.text


class TestSellDefault:
    def test_standard_order(self):
        cafe = make_cafe()
        sale = cafe.sell_default()
        assert (sale.size, sale.sugar_packets, sale.cream_portions) == (4, 2, 1)
        assert cafe.stock() == (96, 48, 29, 19)

    def test_uses_configured_order(self, monkeypatch):
        monkeypatch.setattr(Config, "STANDARD_COFFEE_OUNCES", 12)
        monkeypatch.setattr(Config, "STANDARD_SUGAR_PACKETS", 0)
        cafe = make_cafe()
        cafe.sell_default()
        assert cafe.stock() == (88, 50, 29, 19)


class TestRestock:
    def test_ignores_non_positive(self):
        cafe = make_cafe()
        added = cafe._restock(5, 0, -3, 2)
        assert added == Restock(coffee_ounces=5, cups=2)
        assert cafe.stock() == (105, 50, 30, 22)

    def test_cups_only(self):
        cafe = make_cafe()
        assert cafe._restock_cups(-4) == Restock()
        assert cafe._restock_cups(10) == Restock(cups=10)
        assert cafe.stock() == (100, 50, 30, 30)
