"""
Valuation engine: values products under a simulation model.

Design intent:
- Products are **data only** (no model access, no valuation methods).
- This engine uses a **registry of valuers** for dispatch, enabling:
  - Adding new products without modifying engine code
  - Swapping valuation conventions per product type
  - Third-party valuer plugins
"""

from __future__ import annotations

import logging

from mcpricing.interfaces import Product, SimulationModel
from mcpricing.paths import PathVector
from mcpricing.valuers import BaseValuer

logger = logging.getLogger(__name__)


class ValuationEngine:
    """
    Registry-based valuation engine.

    Valuers are registered at initialization and dispatched based on
    can_value() checks. First matching valuer wins.
    """

    def __init__(self) -> None:
        self._valuers: list[BaseValuer] = []

    def register(self, valuer: BaseValuer) -> None:
        """Register a valuer for dispatch.

        Order matters: first matching valuer wins.
        """
        self._valuers.append(valuer)

    def valuer_for(self, product: Product) -> BaseValuer:
        for valuer in self._valuers:
            if valuer.can_value(product):
                logger.debug(
                    "dispatching %s to %s",
                    type(product).__name__,
                    type(valuer).__name__,
                )
                return valuer
        raise ValueError(
            f"No valuer registered for {type(product).__name__}. "
            "Register a valuer with engine.register(valuer)."
        )

    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """Dispatch to appropriate valuer."""
        return self.valuer_for(product).present_value(product, evaluation_time, model)

    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        """Dispatch to appropriate valuer."""
        if final_time < initial_time:
            raise ValueError(
                f"final_time {final_time} must be >= initial_time {initial_time}"
            )
        return self.valuer_for(product).forward_cash_flow(
            product, initial_time, final_time, model
        )


def create_default_engine() -> ValuationEngine:
    """Factory for default engine with all built-in valuers registered."""
    from mcpricing.valuers import BondValuer, LegValuer, PeriodValuer

    period_valuer = PeriodValuer()
    engine = ValuationEngine()
    engine.register(period_valuer)
    engine.register(LegValuer(period_valuer))
    engine.register(BondValuer())
    return engine
