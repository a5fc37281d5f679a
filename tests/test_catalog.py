"""Tests for the product catalog store."""

from dataclasses import replace
from decimal import Decimal

from pos.catalog import CatalogStore
from pos.models import Product, ProductDraft


def test_add_assigns_id_and_keeps_fields(coffee_draft):
    catalog = CatalogStore(id_factory=lambda: "abc")
    product = catalog.add(coffee_draft)

    assert product == Product(id="abc", name="Coffee", price=Decimal("5.00"), category="Drinks")
    assert catalog.list() == [product]


def test_list_preserves_insertion_order(context, coffee_draft, bagel_draft):
    coffee = context.catalog.add(coffee_draft)
    bagel = context.catalog.add(bagel_draft)

    assert [p.id for p in context.catalog.list()] == [coffee.id, bagel.id]


def test_ids_are_unique_and_not_reused_after_removal():
    ids = iter(["a", "a", "b", "a", "b", "c"])
    catalog = CatalogStore(id_factory=lambda: next(ids))
    draft = ProductDraft(name="Tea", price=2, category="Drinks")

    first = catalog.add(draft)
    second = catalog.add(draft)
    catalog.remove(first.id)
    third = catalog.add(draft)

    assert (first.id, second.id, third.id) == ("a", "b", "c")


def test_update_replaces_matching_product(context, coffee_draft):
    coffee = context.catalog.add(coffee_draft)
    edited = replace(coffee, price=Decimal("5.50"), name="Flat White")

    assert context.catalog.update(edited) is True
    assert context.catalog.get(coffee.id) == edited


def test_update_with_unknown_id_leaves_catalog_unchanged(context, coffee_draft):
    coffee = context.catalog.add(coffee_draft)
    stranger = Product(id="missing", name="Ghost", price=1, category="None")

    assert context.catalog.update(stranger) is False
    assert context.catalog.list() == [coffee]


def test_remove(context, coffee_draft, bagel_draft):
    coffee = context.catalog.add(coffee_draft)
    bagel = context.catalog.add(bagel_draft)

    assert context.catalog.remove(coffee.id) is True
    assert context.catalog.remove(coffee.id) is False
    assert context.catalog.list() == [bagel]


def test_remove_does_not_touch_cart_lines(context, coffee_draft):
    coffee = context.catalog.add(coffee_draft)
    context.cart.add_product(coffee)

    context.catalog.remove(coffee.id)

    assert [line.product_name for line in context.cart.items()] == ["Coffee"]


def test_available_filters_unavailable_products(context, coffee_draft, bagel_draft):
    context.catalog.add(coffee_draft)
    context.catalog.add(replace(bagel_draft, is_available=False))

    assert [p.name for p in context.catalog.available()] == ["Coffee"]


def test_list_returns_a_copy(context, coffee_draft):
    context.catalog.add(coffee_draft)
    context.catalog.list().clear()

    assert len(context.catalog) == 1
