"""Valuer for legs (sums of period values)."""

from __future__ import annotations

from mcpricing.interfaces import Product, SimulationModel
from mcpricing.paths import PathVector
from mcpricing.products.leg import Leg
from mcpricing.valuers.base import BaseValuer
from mcpricing.valuers.period_valuer import PeriodValuer


class LegValuer(BaseValuer):
    """Valuer for legs; delegates each period to a PeriodValuer."""

    def __init__(self, period_valuer: PeriodValuer | None = None) -> None:
        self._period_valuer = period_valuer or PeriodValuer()

    def can_value(self, product: Product) -> bool:
        return isinstance(product, Leg)

    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        assert isinstance(product, Leg)
        return sum(
            (
                self._period_valuer.present_value(period, evaluation_time, model)
                for period in product.periods
            ),
            PathVector.zero(),
        )

    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        assert isinstance(product, Leg)
        return sum(
            (
                self._period_valuer.forward_cash_flow(period, initial_time, final_time, model)
                for period in product.periods
            ),
            PathVector.zero(),
        )
