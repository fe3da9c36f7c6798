"""GraphQL types for the valuation API."""

from __future__ import annotations

from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class SimulationInput:
    """Simulated paths: time grid, tenor structure, forwards [time][period][path], numeraire [time][path]."""

    times: list[float]
    tenor_times: list[float]
    forward_rates: list[list[list[float]]]
    numeraire: list[list[float]]


@strawberry.input
class NotionalInput:
    """Constant notional, or a step amortization schedule when times/amounts are given."""

    amount: Optional[float] = None
    currency: Optional[str] = None
    amortization_times: Optional[list[float]] = None
    amortization_amounts: Optional[list[float]] = None


@strawberry.input
class IndexInput:
    """Coupon index: either a fixed rate or a forward-rate (LIBOR) index with period length."""

    fixed_rate: Optional[float] = None
    libor_period_length: Optional[float] = None
    spread: float = 0.0


@strawberry.input
class PeriodInput:
    """Cash-flow period (times are year fractions from the simulation origin)."""

    period_start: float
    period_end: float
    fixing_date: float
    payment_date: float
    notional: NotionalInput
    index: IndexInput
    daycount_fraction: Optional[float] = None
    coupon_flow: bool = True
    notional_flow: bool = False
    payer: bool = False
    exclude_accrued_interest: bool = False


@strawberry.input
class ZeroCouponBondInput:
    """Zero-coupon bond paying 1 at maturity."""

    maturity: float


# --- Output types (response payloads) ---


@strawberry.type
class ValuationResult:
    """Path average plus the value on every path."""

    value: float
    path_values: list[float]
    n_paths: int
