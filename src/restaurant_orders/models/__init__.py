from .menu_item import MenuItem, MenuCategory
from .order import Order, OrderStatusEnum
from .order_item import OrderItem
from .kitchen_ticket import KitchenTicket, TicketItem, TicketMeta

__all__ = [
    "MenuItem",
    "MenuCategory",
    "Order",
    "OrderStatusEnum",
    "OrderItem",
    "KitchenTicket",
    "TicketItem",
    "TicketMeta",
]
