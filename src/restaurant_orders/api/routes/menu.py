from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from restaurant_orders.crud.menu import list_menu, lookup
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.db.deps import get_context
from restaurant_orders.models import MenuCategory, MenuItem

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("/", response_model=List[MenuItem])
async def list_menu_items(
    category: Optional[MenuCategory] = Query(None, description="Фильтр по категории"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Возвращает меню, опционально только одну категорию.
    """
    return list_menu(ctx, category=category)


@router.get("/{sku}", response_model=MenuItem)
async def get_menu_item(
    sku: str = Path(..., description="SKU позиции"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Возвращает позицию меню по SKU.
    """
    item = lookup(ctx, sku)
    if item is None:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item
