from datetime import datetime

from fastapi import APIRouter, Depends

from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.db.deps import get_context

router = APIRouter()

@router.get("/health", summary="Health check")
async def health_check(ctx: RestaurantContext = Depends(get_context)):
    """
    Простейший health-check эндпоинт.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(),
        "orders": len(ctx.orders),
        "kitchen_queue": len(ctx.kitchen_queue),
    }
