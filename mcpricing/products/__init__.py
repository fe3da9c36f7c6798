"""Products: cash-flow period, leg, zero-coupon bond."""

from mcpricing.products.bond import ZeroCouponBond
from mcpricing.products.leg import Leg, build_leg
from mcpricing.products.period import Period

__all__ = ["Period", "Leg", "build_leg", "ZeroCouponBond"]
