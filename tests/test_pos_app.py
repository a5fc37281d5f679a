"""Pilot-driven smoke tests for the Textual front end."""

from dataclasses import replace

from pos.models import OrderStatus
from pos.order_details_modal import OrderDetailsModal
from pos.orders_screen import OrdersScreen
from pos.pos_app import PosApp


async def test_enter_adds_selected_product_to_cart(context, coffee_draft):
    context.catalog.add(coffee_draft)
    app = PosApp(context)

    async with app.run_test() as pilot:
        await pilot.press("enter", "enter")
        await pilot.pause()

    [line] = context.cart.items()
    assert line.product_name == "Coffee"
    assert line.quantity == 2


async def test_unavailable_product_is_not_added(context, coffee_draft):
    product = context.catalog.add(coffee_draft)
    context.catalog.update(replace(product, is_available=False))
    app = PosApp(context)

    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

    assert context.cart.is_empty()


async def test_commit_through_order_details(context, coffee_draft):
    context.catalog.add(coffee_draft)
    app = PosApp(context)

    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.press("ctrl+s")
        await pilot.pause()
        assert isinstance(app.screen, OrderDetailsModal)

        await pilot.press("ctrl+s")
        await pilot.pause()
        assert not isinstance(app.screen, OrderDetailsModal)

    [order] = context.orders.list()
    assert order.status is OrderStatus.NEW
    assert context.cart.is_empty()


async def test_empty_cart_does_not_open_order_details(context):
    app = PosApp(context)

    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()
        assert not isinstance(app.screen, OrderDetailsModal)

    assert context.orders.list() == []


async def test_orders_screen_advances_status(context, coffee_draft):
    coffee = context.catalog.add(coffee_draft)
    context.cart.add_product(coffee)
    order = context.commit()
    app = PosApp(context)

    async with app.run_test() as pilot:
        await pilot.press("o")
        await pilot.pause()
        assert isinstance(app.screen, OrdersScreen)

        await pilot.press("n", "n", "n")
        await pilot.pause()

    assert context.orders.get(order.id).status is OrderStatus.COMPLETED
