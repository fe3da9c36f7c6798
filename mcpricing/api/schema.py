"""GraphQL schema: valuation queries."""

import strawberry

from mcpricing.api.services import forward_cash_flows, value_periods, value_zero_coupon_bond
from mcpricing.api.types import (
    PeriodInput,
    SimulationInput,
    ValuationResult,
    ZeroCouponBondInput,
)

VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return VERSION

    @strawberry.field
    def value_periods(
        self,
        periods: list[PeriodInput],
        simulation: SimulationInput,
        evaluation_time: float = 0.0,
    ) -> ValuationResult:
        """Pathwise present value of the periods at evaluationTime."""
        return value_periods(
            periods=periods,
            simulation=simulation,
            evaluation_time=evaluation_time,
        )

    @strawberry.field
    def forward_cash_flows(
        self,
        periods: list[PeriodInput],
        simulation: SimulationInput,
        initial_time: float,
        final_time: float,
    ) -> ValuationResult:
        """Pathwise forward cash-flow estimator over [initialTime, finalTime]."""
        return forward_cash_flows(
            periods=periods,
            simulation=simulation,
            initial_time=initial_time,
            final_time=final_time,
        )

    @strawberry.field
    def value_zero_coupon_bond(
        self,
        bond: ZeroCouponBondInput,
        simulation: SimulationInput,
        evaluation_time: float = 0.0,
    ) -> ValuationResult:
        """Zero-coupon bond value on the simulated forward rates."""
        return value_zero_coupon_bond(
            bond=bond,
            simulation=simulation,
            evaluation_time=evaluation_time,
        )


schema = strawberry.Schema(query=Query)
