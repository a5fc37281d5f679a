"""Tests for operator input validation."""

from decimal import Decimal

import pytest

from pos.errors import FormError
from pos.forms import apply_product_form, parse_product_form, parse_settings_form
from pos.models import PrinterSettings, Product


class TestProductForm:
    def test_valid_input(self):
        draft = parse_product_form(" Latte ", "4.5", "Drinks", description=" ", image="")

        assert draft.name == "Latte"
        assert draft.price == Decimal("4.5")
        assert draft.category == "Drinks"
        assert draft.description is None
        assert draft.image is None
        assert draft.is_available is True

    @pytest.mark.parametrize(
        "name, price, category, field",
        [
            ("", "1", "Drinks", "name"),
            ("Tea", "", "Drinks", "price"),
            ("Tea", "1", "  ", "category"),
            ("Tea", "abc", "Drinks", "price"),
            ("Tea", "-2", "Drinks", "price"),
            ("Tea", "nan", "Drinks", "price"),
            ("Tea", "1e30", "Drinks", "price"),
            ("Tea", "1000000.01", "Drinks", "price"),
        ],
    )
    def test_invalid_input(self, name, price, category, field):
        with pytest.raises(FormError) as excinfo:
            parse_product_form(name, price, category)

        assert excinfo.value.field == field

    def test_price_at_the_limit_is_accepted(self):
        assert parse_product_form("Espresso machine", "1000000", "Equipment").price == Decimal("1000000")

    def test_apply_keeps_product_id(self):
        product = Product(id="p1", name="Tea", price="2", category="Drinks")
        draft = parse_product_form("Green Tea", "2.5", "Drinks", is_available=False)

        edited = apply_product_form(product, draft)

        assert edited.id == "p1"
        assert edited.name == "Green Tea"
        assert edited.is_available is False


class TestSettingsForm:
    def _parse(self, **overrides):
        fields = dict(
            shop_name="Driwich",
            currency="usd",
            receipt_footer="Thanks",
            tax_rate="0.08",
            ip_address="192.168.1.20",
            port="9100",
            is_enabled=True,
        )
        fields.update(overrides)
        return parse_settings_form(**fields)

    def test_valid_input(self):
        changes = self._parse()

        assert changes == {
            "shop_name": "Driwich",
            "currency": "USD",
            "receipt_footer": "Thanks",
            "tax_rate": Decimal("0.08"),
            "printer": PrinterSettings(ip_address="192.168.1.20", port=9100, is_enabled=True),
        }

    def test_unparsable_numbers_fall_back_to_defaults(self):
        changes = self._parse(tax_rate="lots", port="")

        assert changes["tax_rate"] == Decimal("0")
        assert changes["printer"].port == 9100

    def test_blank_footer_becomes_none(self):
        assert self._parse(receipt_footer="  ")["receipt_footer"] is None

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"port": "70000"}, "port"),
            ({"port": "0"}, "port"),
            ({"tax_rate": "-0.1"}, "tax_rate"),
            ({"shop_name": ""}, "shop_name"),
            ({"ip_address": " "}, "ip_address"),
        ],
    )
    def test_out_of_range_values(self, overrides, field):
        with pytest.raises(FormError) as excinfo:
            self._parse(**overrides)

        assert excinfo.value.field == field
