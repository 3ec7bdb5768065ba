from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional

from restaurant_orders.config import settings
from restaurant_orders.crud.menu import lookup
from restaurant_orders.crud.order import compute_totals, line_total
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.models import MenuCategory, Order, OrderItem
from restaurant_orders.schemas.order import OrderReport, ReportRow, ReportTotals

ZERO = Decimal("0")


def format_money(amount: Decimal, currency: Optional[str] = None) -> str:
    value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value} {currency or settings.CURRENCY}"


def _report_row(ctx: RestaurantContext, line: OrderItem) -> ReportRow:
    item = lookup(ctx, line.sku)
    return ReportRow(
        sku=line.sku,
        name=item.name if item else line.sku,
        qty=line.qty,
        price=format_money(item.price if item else ZERO),
        line=format_money(line_total(ctx, line.sku, line.qty)),
    )


def order_report(ctx: RestaurantContext, order: Order) -> OrderReport:
    """
    Счёт по заказу: строка на каждую позицию и итоги, всё уже в виде денежных строк.
    Заказ не изменяется.
    """
    totals = compute_totals(ctx, order)
    return OrderReport(
        rows=[_report_row(ctx, line) for line in order.items],
        totals=ReportTotals(
            subtotal=format_money(totals.subtotal),
            discount=f"- {format_money(totals.discount)}",
            taxes=format_money(totals.taxes),
            service=format_money(totals.service),
            total=format_money(totals.total),
        ),
    )


def items_in_category(ctx: RestaurantContext, order: Order, category: MenuCategory) -> List[ReportRow]:
    """
    Строки заказа одной категории (например, все напитки).
    """
    rows = []
    for line in order.items:
        item = lookup(ctx, line.sku)
        if item is not None and item.category == category:
            rows.append(_report_row(ctx, line))
    return rows


def sales_by_category(ctx: RestaurantContext, order: Order) -> Dict[str, Decimal]:
    """
    Сумма строк заказа по категориям меню (до скидки).
    """
    sales: Dict[str, Decimal] = {}
    for line in order.items:
        item = lookup(ctx, line.sku)
        if item is None:
            continue
        key = item.category.value
        sales[key] = sales.get(key, ZERO) + line_total(ctx, line.sku, line.qty)
    return sales
