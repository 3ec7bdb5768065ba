from typing import List

from restaurant_orders.crud.menu import lookup
from restaurant_orders.crud.status import transition
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.logging import get_logger
from restaurant_orders.models import KitchenTicket, Order, OrderStatusEnum, TicketItem, TicketMeta

logger = get_logger(__name__)


def to_kitchen_ticket(ctx: RestaurantContext, order: Order) -> KitchenTicket:
    """
    Собирает тикет для кухни: состав заказа с названиями и категориями из меню.
    """
    ticket_items = []
    for line in order.items:
        item = lookup(ctx, line.sku)
        ticket_items.append(
            TicketItem(
                sku=line.sku,
                name=item.name if item else line.sku,
                category=item.category if item else None,
                qty=line.qty,
            )
        )

    return KitchenTicket(
        id=order.id,
        table=order.table,
        server=order.server,
        ticket_items=ticket_items,
        meta=TicketMeta(
            status=order.status,
            coupon=order.coupon,
            created_at=order.created_at,
        ),
    )


def _drop_ticket(ctx: RestaurantContext, order_id: str) -> bool:
    idx = next((i for i, t in enumerate(ctx.kitchen_queue) if t.id == order_id), None)
    if idx is None:
        return False
    del ctx.kitchen_queue[idx]
    return True


def send_to_kitchen(ctx: RestaurantContext, order: Order) -> Order:
    """
    Переводит заказ в SENT_TO_KITCHEN и ставит тикет в конец очереди кухни.
    При недопустимом переходе очередь не меняется.
    """
    with ctx.lock:
        transition(ctx, order, OrderStatusEnum.SENT_TO_KITCHEN)
        ticket = to_kitchen_ticket(ctx, order)
        ctx.kitchen_queue.append(ticket)

    logger.info(f"Ticket {ticket.id} queued for table {ticket.table} ({len(ticket.ticket_items)} lines)")
    return order


def mark_served(ctx: RestaurantContext, order: Order) -> Order:
    """
    Переводит заказ в SERVED и убирает его тикет из очереди (если он там есть).
    """
    with ctx.lock:
        transition(ctx, order, OrderStatusEnum.SERVED)
        removed = _drop_ticket(ctx, order.id)

    if not removed:
        logger.debug(f"Ticket {order.id} was not in the kitchen queue")
    return order


def cancel_order(ctx: RestaurantContext, order: Order) -> Order:
    """
    Отменяет заказ; тикет, если заказ уже ушёл на кухню, снимается с очереди.
    """
    with ctx.lock:
        transition(ctx, order, OrderStatusEnum.CANCELLED)
        _drop_ticket(ctx, order.id)
    return order


def kitchen_queue(ctx: RestaurantContext) -> List[KitchenTicket]:
    with ctx.lock:
        return list(ctx.kitchen_queue)
