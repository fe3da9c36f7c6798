"""
Protocol-based interfaces for all extension points in the valuation library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
New simulation models, notionals, rate indices and valuers plug in without
modifying core code.

All times are year fractions measured from the common simulation origin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from mcpricing.paths import PathVector

if TYPE_CHECKING:
    from mcpricing.products.period import Period


@runtime_checkable
class SimulationModel(Protocol):
    """Protocol for Monte Carlo interest-rate simulations.

    Paths are generated elsewhere; products only query them. Queries that
    cannot be answered (e.g. time outside the simulated horizon) raise.
    """

    def numeraire(self, time: float) -> PathVector:
        """Numeraire value at time on every path."""
        ...

    def forward_rate(
        self, fixing_time: float, period_start: float, period_end: float
    ) -> PathVector:
        """Simulated forward rate for [period_start, period_end] as of fixing_time."""
        ...


@runtime_checkable
class Notional(Protocol):
    """Protocol for notionals.

    The period and model arguments allow path-dependent or amortizing
    notionals; constant notionals ignore them.
    """

    currency: Optional[str]

    def value_at_start(self, period: Period, model: SimulationModel) -> PathVector:
        ...

    def value_at_end(self, period: Period, model: SimulationModel) -> PathVector:
        ...


@runtime_checkable
class RateIndex(Protocol):
    """Protocol for coupon-determining indices.

    Two distinct queries are needed: the value fixed on the fixing date (used
    for discounted valuation) and the value as read off the path from a given
    evaluation time (used for the forward cash-flow estimator).
    """

    def fixing_value(self, fixing_date: float, model: SimulationModel) -> PathVector:
        """Index value as fixed on fixing_date."""
        ...

    def fixing_value_at(
        self, evaluation_time: float, fixing_date: float, model: SimulationModel
    ) -> PathVector:
        """Index value for fixing_date as observed on the path at evaluation_time."""
        ...


@runtime_checkable
class Product(Protocol):
    """Marker protocol for all valuable products.

    Products are data-only; valuation logic lives in Valuer implementations.
    """

    pass


class Valuer(Protocol):
    """Protocol for product valuation implementations.

    Each valuer handles one or more product types and can be registered with
    the ValuationEngine for dispatch.
    """

    def can_value(self, product: Product) -> bool:
        """Return True if this valuer handles the given product type."""
        ...

    def present_value(
        self, product: Product, evaluation_time: float, model: SimulationModel
    ) -> PathVector:
        """Pathwise value of future flows, rebased to evaluation_time."""
        ...

    def forward_cash_flow(
        self,
        product: Product,
        initial_time: float,
        final_time: float,
        model: SimulationModel,
    ) -> PathVector:
        """Pathwise estimator of flows known at final_time, rebased to initial_time."""
        ...
