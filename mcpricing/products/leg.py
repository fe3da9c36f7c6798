"""Leg product: an ordered sequence of periods (data only)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from mcpricing.interfaces import Notional, RateIndex
from mcpricing.products.period import Period


@dataclass(frozen=True)
class Leg:
    """Sequence of periods; values are the pathwise sums over the periods."""

    periods: tuple[Period, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "periods", tuple(self.periods))


def build_leg(
    schedule: Sequence[float],
    notional: Notional,
    index: RateIndex,
    daycount_fractions: Optional[Sequence[float]] = None,
    coupon_flow: bool = True,
    notional_flow: bool = False,
    payer: bool = False,
    exclude_accrued_interest: bool = False,
) -> Leg:
    """
    Build a leg from schedule times [T_0, T_1, ..., T_n].

    Period i runs over [T_i, T_{i+1}], fixes at T_i and pays at T_{i+1}.
    All periods share the same notional and index.
    """
    if len(schedule) < 2:
        raise ValueError("schedule must hold at least two times")
    n = len(schedule) - 1
    if daycount_fractions is not None and len(daycount_fractions) != n:
        raise ValueError(f"expected {n} daycount fractions, got {len(daycount_fractions)}")
    periods = []
    for i in range(n):
        start, end = schedule[i], schedule[i + 1]
        periods.append(
            Period(
                period_start=start,
                period_end=end,
                fixing_date=start,
                payment_date=end,
                notional=notional,
                index=index,
                daycount_fraction=(
                    daycount_fractions[i] if daycount_fractions is not None else None
                ),
                coupon_flow=coupon_flow,
                notional_flow=notional_flow,
                payer=payer,
                exclude_accrued_interest=exclude_accrued_interest,
            )
        )
    return Leg(periods=tuple(periods))
