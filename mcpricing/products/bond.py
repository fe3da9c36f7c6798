"""Zero-coupon bond product (data only; valuation via ValuationEngine)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ZeroCouponBond:
    """
    Zero-coupon bond paying 1 at maturity.
    Valued on the model's forward rate: PV(t) = 1 / (1 + L(t; t, T) (T - t)).
    """

    maturity: float
