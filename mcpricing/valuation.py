"""
Valuation entrypoint.

Most users of the library should only need `present_value`,
`forward_cash_flow` and `price`. They delegate to a default
`ValuationEngine` instance that contains the valuation logic.
"""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np

from mcpricing.engine import create_default_engine
from mcpricing.interfaces import SimulationModel
from mcpricing.paths import PathVector
from mcpricing.products.bond import ZeroCouponBond
from mcpricing.products.leg import Leg
from mcpricing.products.period import Period


Product: TypeAlias = Period | Leg | ZeroCouponBond

_default_engine = create_default_engine()


def present_value(
    product: Product, evaluation_time: float, model: SimulationModel
) -> PathVector:
    """Pathwise value of product rebased to evaluation_time (via default engine)."""
    return _default_engine.present_value(product, evaluation_time, model)


def forward_cash_flow(
    product: Product, initial_time: float, final_time: float, model: SimulationModel
) -> PathVector:
    """Pathwise forward cash-flow estimator over [initial_time, final_time]."""
    return _default_engine.forward_cash_flow(product, initial_time, final_time, model)


def price(product: Product, model: SimulationModel, evaluation_time: float = 0.0) -> float:
    """Monte Carlo price: path average of the present value.

    With a deterministic numeraire at evaluation_time (e.g. t = 0) this is the
    risk-neutral price.
    """
    return present_value(product, evaluation_time, model).average()


def cash_flow_profile(
    product: Product, times: Sequence[float], model: SimulationModel
) -> np.ndarray:
    """
    Forward cash-flow estimators on consecutive intervals of a time grid.

    Row k holds forward_cash_flow(times[k], times[k + 1]) on every path, i.e.
    shape (len(times) - 1, n_paths). Deterministic rows are broadcast.
    """
    if len(times) < 2:
        raise ValueError("times must hold at least two points")
    rows = [
        forward_cash_flow(product, times[k], times[k + 1], model)
        for k in range(len(times) - 1)
    ]
    n_paths = max(len(row) for row in rows)
    return np.vstack([row.to_numpy(n_paths) for row in rows])
