from decimal import Decimal

import pytest

from restaurant_orders.crud.menu import register_coupon
from restaurant_orders.discounts import DEFAULT_COUPONS, FlatOff, PercentOff, compute_discount, is_recognized
from restaurant_orders.exceptions import UnrecognizedCoupon


def test_no_coupon_gives_zero():
    assert compute_discount(Decimal("214")) == Decimal("0")


def test_welcome10_is_capped_at_ten():
    assert compute_discount(Decimal("214"), "WELCOME10") == Decimal("10")


def test_welcome10_below_cap_takes_ten_percent():
    assert compute_discount(Decimal("42"), "WELCOME10") == Decimal("4.2")


def test_drinks5_is_flat():
    assert compute_discount(Decimal("18"), "DRINKS5") == Decimal("5")


def test_drinks5_never_exceeds_subtotal():
    assert compute_discount(Decimal("3"), "DRINKS5") == Decimal("3")
    assert compute_discount(Decimal("0"), "DRINKS5") == Decimal("0")


def test_unknown_coupon_warns_and_gives_zero():
    with pytest.warns(UnrecognizedCoupon, match="BOGUS"):
        assert compute_discount(Decimal("100"), "BOGUS") == Decimal("0")


@pytest.mark.parametrize("subtotal", ["0", "0.5", "4.99", "5", "42", "100", "214", "10000"])
@pytest.mark.parametrize("coupon", [None, "WELCOME10", "DRINKS5"])
def test_discount_stays_within_subtotal(subtotal, coupon):
    amount = Decimal(subtotal)
    discount = compute_discount(amount, coupon)
    assert Decimal("0") <= discount <= amount


def test_is_recognized():
    assert is_recognized("WELCOME10")
    assert not is_recognized("welcome10")
    assert not is_recognized(None)


def test_registered_coupon_is_used_by_context(ctx):
    register_coupon(ctx, "HALF", PercentOff(rate=Decimal("0.5")))
    register_coupon(ctx, "TWENTY", FlatOff(amount=Decimal("20")))

    assert compute_discount(Decimal("80"), "HALF", ctx.coupons) == Decimal("40")
    assert compute_discount(Decimal("80"), "TWENTY", ctx.coupons) == Decimal("20")
    # таблица по умолчанию не затронута
    assert "HALF" not in DEFAULT_COUPONS
