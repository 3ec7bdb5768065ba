import threading
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from restaurant_orders.data import DEFAULT_MENU
from restaurant_orders.discounts import DEFAULT_COUPONS, CouponStrategy
from restaurant_orders.models import KitchenTicket, MenuItem, Order


class RestaurantContext:
    """
    Состояние одного ресторана в памяти: меню, купоны, заказы и очередь кухни.
    Создаётся при старте и передаётся в каждую операцию.
    """

    def __init__(
        self,
        menu: Iterable[MenuItem] = (),
        coupons: Optional[Mapping[str, CouponStrategy]] = None,
    ):
        # меню только для чтения
        self.catalog: Mapping[str, MenuItem] = MappingProxyType({item.sku: item for item in menu})
        self.coupons: Dict[str, CouponStrategy] = dict(DEFAULT_COUPONS if coupons is None else coupons)
        self.orders: Dict[str, Order] = {}
        self.kitchen_queue: List[KitchenTicket] = []
        # изменения заказов и очереди кухни сериализуются
        self.lock = threading.RLock()

    @classmethod
    def with_default_menu(cls) -> "RestaurantContext":
        return cls(menu=DEFAULT_MENU)
