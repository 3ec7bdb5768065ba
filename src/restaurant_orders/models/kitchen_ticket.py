from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel

from .menu_item import MenuCategory
from .order import OrderStatusEnum


class TicketItem(BaseModel):
    sku: str
    name: str
    category: Optional[MenuCategory] = None
    qty: int

    class Config:
        frozen = True


class TicketMeta(BaseModel):
    # Всё, что есть в заказе помимо id, table, server и items
    status: OrderStatusEnum
    coupon: Optional[str] = None
    created_at: datetime

    class Config:
        frozen = True


class KitchenTicket(BaseModel):
    id: str
    table: Union[int, str]
    server: str
    ticket_items: List[TicketItem]
    meta: TicketMeta

    class Config:
        frozen = True
