"""Base valuer abstract class for product valuation implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mcpricing.interfaces import Product, SimulationModel
from mcpricing.paths import PathVector


class BaseValuer(ABC):
    """Abstract base class for product valuers.

    Subclasses implement can_value(), present_value() and forward_cash_flow()
    for specific product types. This allows valuation logic to be isolated,
    testable, and pluggable.
    """

    @abstractmethod
    def can_value(self, product: Product) -> bool:
        """Return True if this valuer handles the product type."""
        ...

    @abstractmethod
    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """Pathwise value of flows after evaluation_time, rebased to evaluation_time."""
        ...

    @abstractmethod
    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        """Pathwise forward cash-flow estimator over [initial_time, final_time]."""
        ...
