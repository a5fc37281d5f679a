"""Tests for the cross-store operations of PosContext."""

from decimal import Decimal

import pytest

from pos.context import PosContext
from pos.errors import EmptyCartError, InvalidTransitionError
from pos.models import OrderItem, OrderStatus, PrinterSettings, Product


def _fill_cart(context):
    context.cart.add_item(OrderItem(product_id="p1", product_name="Coffee", quantity=2, unit_price="5.00"))
    context.cart.add_item(OrderItem(product_id="p2", product_name="Bagel", quantity=1, unit_price="3.50"))


def _enable_printer(context):
    context.settings.update(printer=PrinterSettings(ip_address="10.0.0.50", port=9100, is_enabled=True))


class TestCommit:
    def test_commit_creates_order_and_empties_cart(self, context):
        _fill_cart(context)
        lines = context.cart.items()

        order = context.commit()

        assert order.total == Decimal("13.50")
        assert order.status is OrderStatus.NEW
        assert order.items == tuple(lines)
        assert context.cart.items() == []
        assert context.orders.list() == [order]

    def test_commit_empty_cart_changes_nothing(self, context):
        _fill_cart(context)
        existing = context.commit()

        with pytest.raises(EmptyCartError):
            context.commit()

        assert context.orders.list() == [existing]
        assert context.cart.is_empty()

    def test_orders_listed_most_recent_first(self, context):
        _fill_cart(context)
        order_a = context.commit()
        _fill_cart(context)
        order_b = context.commit()

        assert context.orders.list() == [order_b, order_a]

    def test_commit_uses_settings_currency(self, context):
        context.settings.update(currency="JPY")
        context.cart.add_item(OrderItem(product_id="p1", product_name="Onigiri", quantity=3, unit_price="150.4"))

        assert context.commit().total == Decimal("451")

    def test_currency_change_does_not_restate_committed_orders(self, context, printer_factory):
        _enable_printer(context)
        _fill_cart(context)
        order = context.commit()
        context.settings.update(currency="JPY")

        context.print_order(context.orders.get(order.id))

        assert order.currency == "USD"
        assert "TOTAL: $13.50" in printer_factory.printers[0].written[0].splitlines()

    def test_catalog_edits_do_not_change_committed_orders(self, context, coffee_draft):
        coffee = context.catalog.add(coffee_draft)
        context.cart.add_product(coffee, quantity=2)
        order = context.commit()

        context.catalog.update(Product(id=coffee.id, name="Decaf", price="9.00", category="Drinks"))
        context.catalog.remove(coffee.id)

        stored = context.orders.get(order.id)
        assert stored.items[0].product_name == "Coffee"
        assert stored.total == Decimal("10.00")

    def test_each_context_is_independent(self):
        first = PosContext()
        second = PosContext()
        first.cart.add_item(OrderItem(product_id="p1", product_name="Tea", quantity=1, unit_price="2.00"))
        first.settings.update(shop_name="Elsewhere")

        assert second.cart.is_empty()
        assert second.settings.get().shop_name == "Driwich"


class TestTransitionOrder:
    def test_allowed_sequence(self, context):
        _fill_cart(context)
        order = context.commit()

        assert context.transition_order(order.id, OrderStatus.PROCESSING).status is OrderStatus.PROCESSING
        assert context.transition_order(order.id, "completed").status is OrderStatus.COMPLETED

    @pytest.mark.parametrize("terminal", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    def test_terminal_orders_offer_no_transition(self, context, terminal):
        _fill_cart(context)
        order = context.commit()
        context.orders.set_status(order.id, terminal)

        with pytest.raises(InvalidTransitionError):
            context.transition_order(order.id, OrderStatus.PROCESSING)
        assert context.orders.get(order.id).status is terminal

    def test_skipping_processing_is_rejected(self, context):
        _fill_cart(context)
        order = context.commit()

        with pytest.raises(InvalidTransitionError):
            context.transition_order(order.id, OrderStatus.COMPLETED)

    def test_unknown_order(self, context):
        with pytest.raises(KeyError):
            context.transition_order("missing", OrderStatus.PROCESSING)


class TestPrinting:
    def test_print_failure_leaves_state_alone(self, id_factory, refusing_printer_factory):
        context = PosContext(id_factory=id_factory, printer_factory=refusing_printer_factory)
        _enable_printer(context)
        _fill_cart(context)
        order = context.commit()

        result = context.print_order(order)

        assert result.success is False
        assert context.orders.list() == [order]
        assert context.cart.is_empty()

    def test_print_uses_current_settings(self, context, printer_factory):
        _enable_printer(context)
        context.settings.update(shop_name="Corner Cafe", receipt_footer="See you soon")
        _fill_cart(context)
        order = context.commit()

        result = context.print_order(order)

        assert result.success is True
        receipt = printer_factory.printers[0].written[0]
        assert receipt.startswith("Corner Cafe\n")
        assert "See you soon" in receipt

    def test_print_with_disabled_printer(self, context, printer_factory):
        _fill_cart(context)
        order = context.commit()

        result = context.print_order(order)

        assert result.success is False
        assert printer_factory.printers == []

    def test_test_print(self, context, printer_factory):
        _enable_printer(context)

        result = context.test_print()

        assert result.success is True
        assert "Test Product 1" in printer_factory.printers[0].written[0]
        assert context.orders.list() == []
