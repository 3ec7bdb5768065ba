"""Стартовое меню ресторана."""

from decimal import Decimal

from restaurant_orders.models import MenuCategory, MenuItem

DEFAULT_MENU: tuple[MenuItem, ...] = (
    MenuItem(sku="PZ01", name="Margherita Pizza", price=Decimal("65"), category=MenuCategory.pizza),
    MenuItem(sku="PZ02", name="Pepperoni Pizza", price=Decimal("75"), category=MenuCategory.pizza),
    MenuItem(sku="PS01", name="Caesar Salad", price=Decimal("42"), category=MenuCategory.salad),
    MenuItem(sku="DR01", name="Fresh Lemon Juice", price=Decimal("18"), category=MenuCategory.drink),
    MenuItem(sku="DR02", name="Mineral Water", price=Decimal("10"), category=MenuCategory.drink),
    MenuItem(sku="DS01", name="Chocolate Mousse", price=Decimal("28"), category=MenuCategory.dessert),
)
