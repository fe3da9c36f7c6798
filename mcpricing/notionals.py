"""
Notional implementations.

Notionals are shared by reference between periods and never mutated. Both
variants implement the Notional protocol structurally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from mcpricing.interfaces import SimulationModel
from mcpricing.paths import PathVector

if TYPE_CHECKING:
    from mcpricing.products.period import Period


@dataclass(frozen=True)
class ConstantNotional:
    """Constant (non-stochastic) notional, identical at period start and end."""

    amount: float
    currency: Optional[str] = None
    value: PathVector = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", PathVector.constant(self.amount))

    def value_at_start(self, period: Period, model: SimulationModel) -> PathVector:
        return self.value

    def value_at_end(self, period: Period, model: SimulationModel) -> PathVector:
        return self.value


@dataclass(frozen=True)
class AmortizingNotional:
    """
    Step notional schedule: amounts[i] is in force from times[i] onwards.

    A period uses the amount in force at its start, both for the start and
    the end exchange, so that exchanges of consecutive periods net to the
    amortization payments.
    """

    times: tuple[float, ...]
    amounts: tuple[float, ...]
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "times", tuple(float(t) for t in self.times))
        object.__setattr__(self, "amounts", tuple(float(a) for a in self.amounts))
        if not self.times:
            raise ValueError("amortization schedule must not be empty")
        if len(self.times) != len(self.amounts):
            raise ValueError("times and amounts must have the same length")
        for i in range(1, len(self.times)):
            if self.times[i] <= self.times[i - 1]:
                raise ValueError("amortization times must be strictly increasing")

    def amount_at(self, time: float) -> float:
        """Amount in force at time; the first amount applies before the schedule."""
        index = int(np.searchsorted(self.times, time, side="right")) - 1
        return self.amounts[max(index, 0)]

    def value_at_start(self, period: Period, model: SimulationModel) -> PathVector:
        return PathVector.constant(self.amount_at(period.period_start))

    def value_at_end(self, period: Period, model: SimulationModel) -> PathVector:
        return PathVector.constant(self.amount_at(period.period_start))
