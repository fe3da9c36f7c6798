"""Valuer for zero-coupon bonds on the model's forward rates."""

from __future__ import annotations

from mcpricing.interfaces import Product, SimulationModel
from mcpricing.paths import PathVector
from mcpricing.products.bond import ZeroCouponBond
from mcpricing.valuers.base import BaseValuer


class BondValuer(BaseValuer):
    """Valuer for zero-coupon bonds (unit payoff at maturity)."""

    def can_value(self, product: Product) -> bool:
        return isinstance(product, ZeroCouponBond)

    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """P(t, T) = 1 / (1 + L(t; t, T) (T - t)); zero after maturity."""
        assert isinstance(product, ZeroCouponBond)
        bond = product
        if evaluation_time > bond.maturity:
            return PathVector.zero()
        rate = model.forward_rate(evaluation_time, evaluation_time, bond.maturity)
        return (rate * (bond.maturity - evaluation_time) + 1.0).invert()

    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        """N(t0) / N(T) if the maturity falls in (initial_time, final_time], else zero."""
        assert isinstance(product, ZeroCouponBond)
        bond = product
        if initial_time >= bond.maturity or final_time < bond.maturity:
            return PathVector.zero()
        return model.numeraire(initial_time) / model.numeraire(bond.maturity)
