from types import MappingProxyType
from typing import FrozenSet, Mapping, Union

from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.exceptions import IllegalTransition
from restaurant_orders.logging import get_logger
from restaurant_orders.models import Order, OrderStatusEnum

logger = get_logger(__name__)

# OPEN → SENT_TO_KITCHEN → SERVED → PAID, отмена возможна до подачи
ALLOWED_TRANSITIONS: Mapping[OrderStatusEnum, FrozenSet[OrderStatusEnum]] = MappingProxyType({
    OrderStatusEnum.OPEN: frozenset({OrderStatusEnum.SENT_TO_KITCHEN, OrderStatusEnum.CANCELLED}),
    OrderStatusEnum.SENT_TO_KITCHEN: frozenset({OrderStatusEnum.SERVED, OrderStatusEnum.CANCELLED}),
    OrderStatusEnum.SERVED: frozenset({OrderStatusEnum.PAID}),
    OrderStatusEnum.PAID: frozenset(),
    OrderStatusEnum.CANCELLED: frozenset(),
})


def allowed_transitions(status: OrderStatusEnum) -> FrozenSet[OrderStatusEnum]:
    return ALLOWED_TRANSITIONS.get(status, frozenset())


def is_terminal(status: OrderStatusEnum) -> bool:
    return not allowed_transitions(status)


def transition(
    ctx: RestaurantContext,
    order: Order,
    next_status: Union[OrderStatusEnum, str],
) -> Order:
    """
    Переводит заказ в новый статус.
    Недопустимый переход -> IllegalTransition, статус заказа не меняется.
    """
    try:
        next_status = OrderStatusEnum(next_status)
    except ValueError:
        logger.warning(f"Order {order.id}: unknown status {next_status!r}")
        raise IllegalTransition(order.status, next_status)

    with ctx.lock:
        current = order.status
        if next_status not in allowed_transitions(current):
            logger.warning(f"Order {order.id}: invalid transition {current.value} → {next_status.value}")
            raise IllegalTransition(current, next_status)
        order.status = next_status

    logger.info(f"Order {order.id}: {current.value} → {next_status.value}")
    return order


def pay(ctx: RestaurantContext, order: Order) -> Order:
    return transition(ctx, order, OrderStatusEnum.PAID)
