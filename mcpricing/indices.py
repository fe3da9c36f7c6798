"""Rate indices used as coupon sources for periods."""

from __future__ import annotations

from dataclasses import dataclass

from mcpricing.interfaces import SimulationModel
from mcpricing.paths import PathVector


@dataclass(frozen=True)
class LIBORIndex:
    """
    Forward-rate index over [fixing, fixing + period_length], plus a spread.

    fixing_value reads the rate fixed on the fixing date. fixing_value_at reads
    the same forward as observed at evaluation_time: before the fixing this is
    the running forward, afterwards the realized fixing.
    """

    period_length: float
    spread: float = 0.0

    def __post_init__(self) -> None:
        if self.period_length <= 0:
            raise ValueError("period_length must be > 0")

    def fixing_value(self, fixing_date: float, model: SimulationModel) -> PathVector:
        return self.fixing_value_at(fixing_date, fixing_date, model)

    def fixing_value_at(
        self, evaluation_time: float, fixing_date: float, model: SimulationModel
    ) -> PathVector:
        rate = model.forward_rate(
            evaluation_time, fixing_date, fixing_date + self.period_length
        )
        return rate + self.spread if self.spread else rate


@dataclass(frozen=True)
class FixedCoupon:
    """Fixed coupon rate; both queries return the same constant."""

    rate: float

    def fixing_value(self, fixing_date: float, model: SimulationModel) -> PathVector:
        return PathVector.constant(self.rate)

    def fixing_value_at(
        self, evaluation_time: float, fixing_date: float, model: SimulationModel
    ) -> PathVector:
        return PathVector.constant(self.rate)
