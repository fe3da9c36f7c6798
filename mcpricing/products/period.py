"""Cash-flow period product (data only; valuation via ValuationEngine)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mcpricing.interfaces import Notional, RateIndex


@dataclass(frozen=True)
class Period:
    """
    A single cash-flow period: coupon from an index and optional notional exchange.

    - coupon = index(fixing_date) * daycount_fraction, paid on payment_date
      on the notional at period start.
    - notional_flow: notional paid out at period_start and received back at
      period_end (only flows after the evaluation time count).
    - payer: flows are paid (negative sign); receiver is the default.
    - exclude_accrued_interest: clean valuation, the coupon accrued up to the
      evaluation time is removed.

    daycount_fraction defaults to period_end - period_start. The notional is
    shared by reference with other periods.
    """

    period_start: float
    period_end: float
    fixing_date: float
    payment_date: float
    notional: Notional
    index: RateIndex
    daycount_fraction: Optional[float] = None
    coupon_flow: bool = True
    notional_flow: bool = False
    payer: bool = False
    exclude_accrued_interest: bool = False

    def __post_init__(self) -> None:
        if self.period_start > self.period_end:
            raise ValueError(
                f"period_start {self.period_start} must be <= period_end {self.period_end}"
            )
        if self.daycount_fraction is None:
            object.__setattr__(
                self, "daycount_fraction", self.period_end - self.period_start
            )
