import enum
from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .order_item import OrderItem


class OrderStatusEnum(str, enum.Enum):
    OPEN = "OPEN"
    SENT_TO_KITCHEN = "SENT_TO_KITCHEN"
    SERVED = "SERVED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


class Order(BaseModel):
    id: str
    table: Union[int, str]
    server: str
    status: OrderStatusEnum = OrderStatusEnum.OPEN
    coupon: Optional[str] = None
    items: List[OrderItem] = []
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def find_line(self, sku: str) -> Optional[OrderItem]:
        return next((line for line in self.items if line.sku == sku), None)
