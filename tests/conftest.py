import pytest
from fastapi.testclient import TestClient

from restaurant_orders.crud.order import add_item, create_order
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.main import create_app


@pytest.fixture
def ctx():
    return RestaurantContext.with_default_menu()


@pytest.fixture
def order(ctx):
    return create_order(ctx, table=12, server="Mariam", coupon="WELCOME10")


@pytest.fixture
def filled_order(ctx, order):
    add_item(ctx, order, "PZ02", 2)
    add_item(ctx, order, "DR01", 3)
    add_item(ctx, order, "DS01", 1)
    return order


@pytest.fixture
def client(ctx):
    with TestClient(create_app(ctx)) as c:
        yield c
