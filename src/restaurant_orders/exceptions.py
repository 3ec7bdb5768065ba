class RestaurantError(ValueError):
    """
    Базовая ошибка домена. Наследуется от ValueError, роуты превращают её в HTTP-ответ.
    """


class UnknownSku(RestaurantError):
    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Unknown SKU: {sku}")


class InvalidQuantity(RestaurantError):
    def __init__(self, qty):
        self.qty = qty
        super().__init__(f"Quantity must be a positive integer, got {qty!r}")


class IllegalTransition(RestaurantError):
    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Invalid transition {getattr(current, 'value', current)} → {getattr(target, 'value', target)}")


class OrderNotFound(RestaurantError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class UnrecognizedCoupon(UserWarning):
    """
    Нефатальный сигнал: купон не распознан, скидка равна нулю.
    """

    def __init__(self, coupon: str):
        self.coupon = coupon
        super().__init__(f"Unknown coupon {coupon} (ignored)")
