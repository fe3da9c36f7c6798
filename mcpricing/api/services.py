"""Service layer: convert GraphQL inputs to library objects and run valuations."""

from __future__ import annotations

import logging

from mcpricing.indices import FixedCoupon, LIBORIndex
from mcpricing.interfaces import Notional, RateIndex
from mcpricing.notionals import AmortizingNotional, ConstantNotional
from mcpricing.paths import PathVector
from mcpricing.products.bond import ZeroCouponBond
from mcpricing.products.leg import Leg
from mcpricing.products.period import Period
from mcpricing.simulation import ForwardRateSimulation
from mcpricing.valuation import forward_cash_flow, present_value

from mcpricing.api.types import (
    IndexInput,
    NotionalInput,
    PeriodInput,
    SimulationInput,
    ValuationResult,
    ZeroCouponBondInput,
)

logger = logging.getLogger(__name__)


def simulation_from_input(s: SimulationInput) -> ForwardRateSimulation:
    """Build ForwardRateSimulation from GraphQL SimulationInput."""
    return ForwardRateSimulation(
        times=s.times,
        tenor_times=s.tenor_times,
        forward_rates=s.forward_rates,
        numeraire_values=s.numeraire,
    )


def _notional_from_input(n: NotionalInput) -> Notional:
    if n.amortization_times is not None or n.amortization_amounts is not None:
        if n.amortization_times is None or n.amortization_amounts is None:
            raise ValueError(
                "notional: amortizationTimes and amortizationAmounts must be given together"
            )
        return AmortizingNotional(
            times=tuple(n.amortization_times),
            amounts=tuple(n.amortization_amounts),
            currency=n.currency,
        )
    if n.amount is None:
        raise ValueError("notional: amount or an amortization schedule is required")
    return ConstantNotional(amount=n.amount, currency=n.currency)


def _index_from_input(i: IndexInput) -> RateIndex:
    if (i.fixed_rate is None) == (i.libor_period_length is None):
        raise ValueError("index: exactly one of fixedRate or liborPeriodLength is required")
    if i.fixed_rate is not None:
        return FixedCoupon(rate=i.fixed_rate + i.spread)
    return LIBORIndex(period_length=i.libor_period_length, spread=i.spread)


def leg_from_input(periods: list[PeriodInput]) -> Leg:
    """Build a Leg from a list of GraphQL PeriodInput."""
    if not periods:
        raise ValueError("periods must not be empty")
    return Leg(
        periods=tuple(
            Period(
                period_start=p.period_start,
                period_end=p.period_end,
                fixing_date=p.fixing_date,
                payment_date=p.payment_date,
                notional=_notional_from_input(p.notional),
                index=_index_from_input(p.index),
                daycount_fraction=p.daycount_fraction,
                coupon_flow=p.coupon_flow,
                notional_flow=p.notional_flow,
                payer=p.payer,
                exclude_accrued_interest=p.exclude_accrued_interest,
            )
            for p in periods
        )
    )


def _result(values: PathVector, n_paths: int) -> ValuationResult:
    path_values = values.to_numpy(n_paths)
    return ValuationResult(
        value=float(path_values.mean()),
        path_values=path_values.tolist(),
        n_paths=n_paths,
    )


def value_periods(
    periods: list[PeriodInput],
    simulation: SimulationInput,
    evaluation_time: float = 0.0,
) -> ValuationResult:
    """Present value of the leg formed by periods, rebased to evaluation_time."""
    model = simulation_from_input(simulation)
    leg = leg_from_input(periods)
    logger.debug("valuing %d periods at t=%s", len(leg.periods), evaluation_time)
    return _result(present_value(leg, evaluation_time, model), model.n_paths)


def forward_cash_flows(
    periods: list[PeriodInput],
    simulation: SimulationInput,
    initial_time: float,
    final_time: float,
) -> ValuationResult:
    """Forward cash-flow estimator of the leg formed by periods."""
    model = simulation_from_input(simulation)
    leg = leg_from_input(periods)
    return _result(forward_cash_flow(leg, initial_time, final_time, model), model.n_paths)


def value_zero_coupon_bond(
    bond: ZeroCouponBondInput,
    simulation: SimulationInput,
    evaluation_time: float = 0.0,
) -> ValuationResult:
    """Zero-coupon bond value on the simulated forward rates."""
    if bond.maturity < 0:
        raise ValueError("bond.maturity must be >= 0")
    model = simulation_from_input(simulation)
    instrument = ZeroCouponBond(maturity=bond.maturity)
    return _result(present_value(instrument, evaluation_time, model), model.n_paths)
