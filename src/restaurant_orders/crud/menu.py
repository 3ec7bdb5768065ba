from typing import List, Optional

from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.discounts import CouponStrategy
from restaurant_orders.logging import get_logger
from restaurant_orders.models import MenuCategory, MenuItem

logger = get_logger(__name__)


def lookup(ctx: RestaurantContext, sku: str) -> Optional[MenuItem]:
    """
    Возвращает позицию меню по SKU или None, если такой нет.
    """
    return ctx.catalog.get(sku)


def list_menu(ctx: RestaurantContext, category: Optional[MenuCategory] = None) -> List[MenuItem]:
    """
    Возвращает меню в исходном порядке, опционально только одну категорию.
    """
    items = list(ctx.catalog.values())
    if category is not None:
        items = [item for item in items if item.category == category]
    return items


def register_coupon(ctx: RestaurantContext, code: str, strategy: CouponStrategy) -> None:
    """
    Добавляет (или заменяет) купон в таблице купонов контекста.
    """
    if code in ctx.coupons:
        logger.warning(f"Coupon {code} replaced")
    ctx.coupons[code] = strategy
