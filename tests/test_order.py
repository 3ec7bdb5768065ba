from decimal import Decimal

import pytest

from restaurant_orders.crud.menu import list_menu, lookup
from restaurant_orders.crud.order import (
    add_item,
    compute_totals,
    create_order,
    get_order,
    line_total,
    list_orders,
    remove_item,
    require_order,
)
from restaurant_orders.exceptions import InvalidQuantity, OrderNotFound, UnknownSku, UnrecognizedCoupon
from restaurant_orders.models import MenuCategory, OrderStatusEnum


def lines(order):
    return [(line.sku, line.qty) for line in order.items]


def test_lookup(ctx):
    assert lookup(ctx, "PZ02").name == "Pepperoni Pizza"
    assert lookup(ctx, "NOPE") is None


def test_list_menu_by_category(ctx):
    assert [i.sku for i in list_menu(ctx, MenuCategory.drink)] == ["DR01", "DR02"]
    assert len(list_menu(ctx)) == 6


def test_create_order(ctx, order):
    assert order.id.startswith("ORD-")
    assert len(order.id) == 10
    assert order.status == OrderStatusEnum.OPEN
    assert order.items == []
    assert get_order(ctx, order.id) is order


def test_order_ids_are_unique(ctx):
    ids = {create_order(ctx, table=1, server="Sam").id for _ in range(200)}
    assert len(ids) == 200


def test_require_order_raises_for_missing(ctx):
    with pytest.raises(OrderNotFound):
        require_order(ctx, "ORD-000000")


def test_list_orders_filters_by_status(ctx, order):
    other = create_order(ctx, table=3, server="Sam")
    other.status = OrderStatusEnum.CANCELLED
    assert list_orders(ctx) == [order, other]
    assert list_orders(ctx, OrderStatusEnum.OPEN) == [order]


def test_add_item_merges_same_sku(ctx, order):
    add_item(ctx, order, "PZ02")
    add_item(ctx, order, "DR01", 2)
    add_item(ctx, order, "PZ02", 3)
    assert lines(order) == [("PZ02", 4), ("DR01", 2)]


def test_add_unknown_sku_leaves_order_unchanged(ctx, filled_order):
    before = lines(filled_order)
    with pytest.raises(UnknownSku):
        add_item(ctx, filled_order, "XX99")
    assert lines(filled_order) == before


@pytest.mark.parametrize("qty", [0, -1, True, 1.5])
def test_add_rejects_bad_quantity(ctx, order, qty):
    with pytest.raises(InvalidQuantity):
        add_item(ctx, order, "PZ01", qty)
    assert order.items == []


def test_remove_item_decrements_then_drops_line(ctx, filled_order):
    remove_item(ctx, filled_order, "DR01")
    assert ("DR01", 2) in lines(filled_order)

    remove_item(ctx, filled_order, "DR01", 5)
    assert "DR01" not in [sku for sku, _ in lines(filled_order)]


def test_remove_missing_sku_is_noop(ctx, filled_order):
    before = lines(filled_order)
    assert remove_item(ctx, filled_order, "PS01") is filled_order
    assert lines(filled_order) == before


def test_add_then_remove_restores_lines(ctx, filled_order):
    before = lines(filled_order)
    add_item(ctx, filled_order, "DR01", 4)
    remove_item(ctx, filled_order, "DR01", 4)
    assert lines(filled_order) == before

    add_item(ctx, filled_order, "PS01", 2)
    remove_item(ctx, filled_order, "PS01", 2)
    assert lines(filled_order) == before


def test_line_total_guards(ctx):
    assert line_total(ctx, "PZ02", 2) == Decimal("150")
    assert line_total(ctx, "NOPE", 2) == Decimal("0")
    assert line_total(ctx, "PZ02", 0) == Decimal("0")


def test_totals_scenario(ctx, filled_order):
    remove_item(ctx, filled_order, "DR01", 1)  # 3 -> 2

    totals = compute_totals(ctx, filled_order)

    assert totals.subtotal == Decimal("214")
    assert totals.discount == Decimal("10")
    assert totals.taxes == Decimal("20.4")
    assert totals.service == Decimal("10.2")
    assert totals.total == Decimal("234.6")
    assert totals.warnings == []


def test_subtotal_matches_independent_sum(ctx, filled_order):
    add_item(ctx, filled_order, "PS01", 3)
    expected = sum(ctx.catalog[line.sku].price * line.qty for line in filled_order.items)
    assert compute_totals(ctx, filled_order).subtotal == expected


def test_totals_of_empty_order(ctx):
    order = create_order(ctx, table=1, server="Sam", coupon="DRINKS5")
    totals = compute_totals(ctx, order)
    assert totals.subtotal == totals.discount == totals.total == Decimal("0")


def test_totals_with_unknown_coupon(ctx):
    order = create_order(ctx, table=1, server="Sam", coupon="FREEPIZZA")
    add_item(ctx, order, "PZ01")
    with pytest.warns(UnrecognizedCoupon):
        totals = compute_totals(ctx, order)
    assert totals.discount == Decimal("0")
    assert totals.total == Decimal("74.75")
    assert totals.warnings == ["Unknown coupon FREEPIZZA (ignored)"]


@pytest.mark.parametrize("qty", [0, -1, True, 1.5])
def test_remove_rejects_bad_quantity(ctx, filled_order, qty):
    before = lines(filled_order)
    with pytest.raises(InvalidQuantity):
        remove_item(ctx, filled_order, "DR01", qty)
    assert lines(filled_order) == before
