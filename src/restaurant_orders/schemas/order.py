from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, conint

from restaurant_orders.models import Order, OrderStatusEnum


class OrderItemRead(BaseModel):
    sku: str
    qty: int
    menu_item_name: str | None = None

    @classmethod
    def from_line_with_name(cls, line, catalog):
        item = catalog.get(line.sku)
        return cls(
            sku=line.sku,
            qty=line.qty,
            menu_item_name=item.name if item else None,
        )


class OrderRead(BaseModel):
    id: str
    table: Union[int, str]
    server: str
    status: OrderStatusEnum
    coupon: Optional[str] = None
    created_at: datetime
    items: List[OrderItemRead] = []
    count_items: int

    @classmethod
    def from_order_with_names(cls, order: Order, catalog):
        return cls(
            id=order.id,
            table=order.table,
            server=order.server,
            status=order.status,
            coupon=order.coupon,
            created_at=order.created_at,
            items=[OrderItemRead.from_line_with_name(line, catalog) for line in order.items],
            count_items=sum(line.qty for line in order.items),
        )


class OrderCreate(BaseModel):
    table: Union[int, str]
    server: str
    coupon: Optional[str] = None

    class Config:
        extra = "forbid"


class OrderItemAdd(BaseModel):
    sku: str
    qty: conint(ge=1) = 1


class OrderStatusUpdate(BaseModel):
    status: OrderStatusEnum


class OrderTotals(BaseModel):
    subtotal: Decimal
    discount: Decimal
    taxes: Decimal
    service: Decimal
    total: Decimal
    warnings: List[str] = []  # нефатальные замечания, например неизвестный купон


class ReportRow(BaseModel):
    sku: str
    name: str
    qty: int
    price: str
    line: str


class ReportTotals(BaseModel):
    subtotal: str
    discount: str
    taxes: str
    service: str
    total: str


class OrderReport(BaseModel):
    rows: List[ReportRow]
    totals: ReportTotals
