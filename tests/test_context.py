import threading
from decimal import Decimal

import pytest

from restaurant_orders.config import Settings
from restaurant_orders.crud.kitchen import kitchen_queue, send_to_kitchen
from restaurant_orders.crud.order import add_item, create_order
from restaurant_orders.db.context import RestaurantContext


def test_contexts_are_isolated():
    first = RestaurantContext.with_default_menu()
    second = RestaurantContext.with_default_menu()
    order = create_order(first, table=1, server="Sam")
    add_item(first, order, "PZ01")
    send_to_kitchen(first, order)

    assert second.orders == {}
    assert kitchen_queue(second) == []


def test_catalog_is_read_only(ctx):
    with pytest.raises(TypeError):
        ctx.catalog["PZ01"] = None


def test_concurrent_add_item_keeps_every_increment(ctx, order):
    def worker():
        for _ in range(100):
            add_item(ctx, order, "DR02")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [(line.sku, line.qty) for line in order.items] == [("DR02", 800)]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TAX_RATE", "0.2")
    monkeypatch.setenv("CURRENCY", "EUR")
    s = Settings()
    assert s.TAX_RATE == Decimal("0.2")
    assert s.CURRENCY == "EUR"
    assert s.SERVICE_RATE == Decimal("0.05")
