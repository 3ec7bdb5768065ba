from typing import List

from fastapi import APIRouter, Depends

from restaurant_orders.crud.kitchen import kitchen_queue
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.db.deps import get_context
from restaurant_orders.models import KitchenTicket

router = APIRouter(prefix="/kitchen", tags=["kitchen"])


@router.get("/queue", response_model=List[KitchenTicket])
async def get_kitchen_queue(ctx: RestaurantContext = Depends(get_context)):
    """
    Очередь кухни: тикеты в порядке отправки.
    """
    return kitchen_queue(ctx)
