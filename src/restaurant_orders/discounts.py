"""
Скидки по купонам.

Каждый купон сопоставлен стратегии (PercentOff или FlatOff). Чтобы добавить
новый купон, достаточно положить стратегию в таблицу купонов контекста,
compute_discount при этом не меняется.
"""

import warnings
from decimal import Decimal
from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field

from restaurant_orders.exceptions import UnrecognizedCoupon
from restaurant_orders.logging import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0")


class PercentOff(BaseModel):
    kind: Literal["percent"] = "percent"
    rate: Decimal = Field(ge=0, le=1)
    cap: Optional[Decimal] = Field(default=None, ge=0)

    class Config:
        frozen = True

    def apply(self, subtotal: Decimal) -> Decimal:
        amount = subtotal * self.rate
        if self.cap is not None:
            amount = min(self.cap, amount)
        return amount


class FlatOff(BaseModel):
    kind: Literal["flat"] = "flat"
    amount: Decimal = Field(ge=0)

    class Config:
        frozen = True

    def apply(self, subtotal: Decimal) -> Decimal:
        return self.amount


CouponStrategy = Annotated[Union[PercentOff, FlatOff], Field(discriminator="kind")]

DEFAULT_COUPONS: Mapping[str, CouponStrategy] = MappingProxyType({
    "WELCOME10": PercentOff(rate=Decimal("0.10"), cap=Decimal("10")),  # 10%, но не больше 10
    "DRINKS5": FlatOff(amount=Decimal("5")),
})


def is_recognized(coupon: Optional[str], coupons: Mapping[str, CouponStrategy] = DEFAULT_COUPONS) -> bool:
    return coupon is not None and coupon in coupons


def compute_discount(
    subtotal: Decimal,
    coupon: Optional[str] = None,
    coupons: Mapping[str, CouponStrategy] = DEFAULT_COUPONS,
) -> Decimal:
    """
    Возвращает сумму скидки в диапазоне [0, subtotal].
    Неизвестный купон не ошибка: скидка 0 и предупреждение UnrecognizedCoupon.
    """
    if coupon is None:
        return ZERO

    strategy = coupons.get(coupon)
    if strategy is None:
        logger.warning(f"Unknown coupon {coupon} (ignored)")
        warnings.warn(UnrecognizedCoupon(coupon), stacklevel=2)
        return ZERO

    # FlatOff может оказаться больше суммы заказа
    return min(max(ZERO, strategy.apply(subtotal)), max(ZERO, subtotal))
