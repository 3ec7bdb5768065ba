from fastapi import Request

from restaurant_orders.db.context import RestaurantContext


def get_context(request: Request) -> RestaurantContext:
    """
    Использовать в Depends(get_context)
    Пример: async def endpoint(ctx: RestaurantContext = Depends(get_context))
    """
    return request.app.state.context
