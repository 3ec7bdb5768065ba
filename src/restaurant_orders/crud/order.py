from decimal import Decimal
from typing import List, Optional, Union
from uuid import uuid4

from restaurant_orders.config import settings
from restaurant_orders.crud.menu import lookup
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.discounts import compute_discount, is_recognized
from restaurant_orders.exceptions import InvalidQuantity, OrderNotFound, UnknownSku
from restaurant_orders.logging import get_logger
from restaurant_orders.models import Order, OrderItem, OrderStatusEnum
from restaurant_orders.schemas.order import OrderTotals

logger = get_logger(__name__)

ZERO = Decimal("0")


def _new_order_id(ctx: RestaurantContext) -> str:
    while True:
        order_id = f"ORD-{uuid4().hex[:6].upper()}"
        if order_id not in ctx.orders:
            return order_id


def _check_qty(qty) -> None:
    # bool тоже int, но количеством не считается
    if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
        raise InvalidQuantity(qty)


def create_order(
    ctx: RestaurantContext,
    table: Union[int, str],
    server: str,
    coupon: Optional[str] = None,
) -> Order:
    """
    Создаёт пустой заказ в статусе OPEN и кладёт его в хранилище контекста.
    """
    with ctx.lock:
        order = Order(id=_new_order_id(ctx), table=table, server=server, coupon=coupon)
        ctx.orders[order.id] = order

    logger.info(f"Order {order.id} created (table={table}, server={server}, coupon={coupon})")
    return order


def get_order(ctx: RestaurantContext, order_id: str) -> Optional[Order]:
    return ctx.orders.get(order_id)


def require_order(ctx: RestaurantContext, order_id: str) -> Order:
    order = get_order(ctx, order_id)
    if order is None:
        raise OrderNotFound(order_id)
    return order


def list_orders(ctx: RestaurantContext, status: Optional[OrderStatusEnum] = None) -> List[Order]:
    """
    Возвращает заказы в порядке создания, опционально с фильтром по статусу.
    """
    orders = list(ctx.orders.values())
    if status is not None:
        orders = [o for o in orders if o.status == status]
    return orders


def add_item(ctx: RestaurantContext, order: Order, sku: str, qty: int = 1) -> Order:
    """
    Добавляет позицию в заказ. Если строка с таким SKU уже есть, увеличивает qty.
    Неизвестный SKU -> UnknownSku, неположительное qty -> InvalidQuantity; заказ не меняется.
    """
    _check_qty(qty)
    if lookup(ctx, sku) is None:
        raise UnknownSku(sku)

    with ctx.lock:
        line = order.find_line(sku)
        if line:
            line.qty += qty
        else:
            order.items.append(OrderItem(sku=sku, qty=qty))

    logger.info(f"Order {order.id}: +{qty} x {sku}")
    return order


def remove_item(ctx: RestaurantContext, order: Order, sku: str, qty: int = 1) -> Order:
    """
    Уменьшает количество по SKU; строка удаляется, когда qty доходит до нуля.
    Отсутствующий SKU не ошибка.
    """
    _check_qty(qty)

    with ctx.lock:
        idx = next((i for i, line in enumerate(order.items) if line.sku == sku), None)
        if idx is None:
            logger.debug(f"Order {order.id}: {sku} not in order, nothing to remove")
            return order

        line = order.items[idx]
        line.qty -= qty
        if line.qty <= 0:
            del order.items[idx]

    logger.info(f"Order {order.id}: -{qty} x {sku}")
    return order


def line_total(ctx: RestaurantContext, sku: str, qty: int) -> Decimal:
    item = lookup(ctx, sku)
    if item is None or qty <= 0:
        return ZERO
    return item.price * qty


def compute_subtotal(ctx: RestaurantContext, order: Order) -> Decimal:
    return sum((line_total(ctx, line.sku, line.qty) for line in order.items), ZERO)


def compute_totals(ctx: RestaurantContext, order: Order) -> OrderTotals:
    """
    Считает итог заказа:
    - subtotal: сумма строк
    - discount: скидка по купону
    - taxes / service: проценты от суммы после скидки
    - total: сумма после скидки + налоги + сервис
    """
    subtotal = compute_subtotal(ctx, order)
    discount = compute_discount(subtotal, order.coupon, ctx.coupons)
    after_discount = max(ZERO, subtotal - discount)
    taxes = after_discount * settings.TAX_RATE
    service = after_discount * settings.SERVICE_RATE

    warnings = []
    if order.coupon is not None and not is_recognized(order.coupon, ctx.coupons):
        warnings.append(f"Unknown coupon {order.coupon} (ignored)")

    return OrderTotals(
        subtotal=subtotal,
        discount=discount,
        taxes=taxes,
        service=service,
        total=after_discount + taxes + service,
        warnings=warnings,
    )
