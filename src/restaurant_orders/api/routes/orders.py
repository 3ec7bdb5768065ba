from decimal import Decimal
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from restaurant_orders.crud.kitchen import cancel_order, mark_served, send_to_kitchen
from restaurant_orders.crud.order import add_item, compute_totals, create_order, list_orders, remove_item, require_order
from restaurant_orders.crud.report import order_report, sales_by_category
from restaurant_orders.crud.status import transition
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.db.deps import get_context
from restaurant_orders.exceptions import IllegalTransition, OrderNotFound, RestaurantError
from restaurant_orders.models import Order, OrderStatusEnum
from restaurant_orders.schemas.order import (
    OrderCreate,
    OrderItemAdd,
    OrderRead,
    OrderReport,
    OrderStatusUpdate,
    OrderTotals,
)


router = APIRouter(prefix="/orders", tags=["orders"])

# Переходы, у которых есть побочный эффект на очередь кухни
_KITCHEN_AWARE = {
    OrderStatusEnum.SENT_TO_KITCHEN: send_to_kitchen,
    OrderStatusEnum.SERVED: mark_served,
    OrderStatusEnum.CANCELLED: cancel_order,
}


def _to_http(e: RestaurantError) -> HTTPException:
    if isinstance(e, OrderNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, IllegalTransition):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


def _load_order(ctx: RestaurantContext, order_id: str) -> Order:
    try:
        return require_order(ctx, order_id)
    except OrderNotFound as e:
        raise _to_http(e)


def _read(ctx: RestaurantContext, order: Order) -> OrderRead:
    return OrderRead.from_order_with_names(order, ctx.catalog)


@router.get("/", response_model=List[OrderRead])
async def list_orders_endpoint(
    status: Optional[OrderStatusEnum] = Query(None, description="Фильтр по статусу"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Возвращает список заказов в порядке создания.
    """
    return [_read(ctx, o) for o in list_orders(ctx, status=status)]


@router.post("/", response_model=OrderRead, status_code=201)
async def create_order_endpoint(order_in: OrderCreate, ctx: RestaurantContext = Depends(get_context)):
    """
    Возвращает созданный заказ (статус OPEN, без позиций).
    """
    order = create_order(ctx, table=order_in.table, server=order_in.server, coupon=order_in.coupon)
    return _read(ctx, order)


@router.get("/{order_id}", response_model=OrderRead)
async def get_order_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Возвращает детализацию заказа по id.
    """
    return _read(ctx, _load_order(ctx, order_id))


@router.post("/{order_id}/items", response_model=OrderRead)
async def add_item_endpoint(
    item_in: OrderItemAdd,
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Добавляет позицию в заказ (или увеличивает количество существующей).
    """
    order = _load_order(ctx, order_id)
    try:
        add_item(ctx, order, item_in.sku, item_in.qty)
    except RestaurantError as e:
        raise _to_http(e)
    return _read(ctx, order)


@router.delete("/{order_id}/items/{sku}", response_model=OrderRead)
async def remove_item_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    sku: str = Path(..., description="SKU позиции"),
    qty: int = Query(1, ge=1, description="Сколько единиц убрать"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Уменьшает количество позиции; при нуле строка удаляется.
    """
    order = _load_order(ctx, order_id)
    try:
        remove_item(ctx, order, sku, qty)
    except RestaurantError as e:
        raise _to_http(e)
    return _read(ctx, order)


@router.get("/{order_id}/totals", response_model=OrderTotals)
async def get_totals_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Итоги заказа: subtotal, скидка, налоги, сервис, total.
    """
    return compute_totals(ctx, _load_order(ctx, order_id))


@router.get("/{order_id}/report", response_model=OrderReport)
async def get_report_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Счёт по заказу с отформатированными суммами.
    """
    return order_report(ctx, _load_order(ctx, order_id))


@router.get("/{order_id}/sales-by-category", response_model=Dict[str, Decimal])
async def get_sales_by_category_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Выручка заказа по категориям меню.
    """
    return sales_by_category(ctx, _load_order(ctx, order_id))


@router.patch("/{order_id}/status", response_model=OrderRead)
async def patch_status_endpoint(
    status_in: OrderStatusUpdate,
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Меняет статус заказа.
    Для SENT_TO_KITCHEN, SERVED и CANCELLED заодно обновляется очередь кухни.
    """
    order = _load_order(ctx, order_id)
    action = _KITCHEN_AWARE.get(status_in.status)
    try:
        if action:
            action(ctx, order)
        else:
            transition(ctx, order, status_in.status)
    except RestaurantError as e:
        raise _to_http(e)
    return _read(ctx, order)


@router.post("/{order_id}/send-to-kitchen", response_model=OrderRead)
async def send_to_kitchen_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Отправляет заказ на кухню.
    """
    order = _load_order(ctx, order_id)
    try:
        send_to_kitchen(ctx, order)
    except RestaurantError as e:
        raise _to_http(e)
    return _read(ctx, order)


@router.post("/{order_id}/served", response_model=OrderRead)
async def mark_served_endpoint(
    order_id: str = Path(..., description="ID заказа"),
    ctx: RestaurantContext = Depends(get_context),
):
    """
    Отмечает заказ поданным и снимает его тикет с очереди кухни.
    """
    order = _load_order(ctx, order_id)
    try:
        mark_served(ctx, order)
    except RestaurantError as e:
        raise _to_http(e)
    return _read(ctx, order)
