"""
Trade specification for initial-margin risk aggregation.

A TradeSpecification describes a traded position by its notional, maturity,
interest-rate curve and the set of sensitivity coordinates it is exposed to.
Downstream aggregation reads the product class, risk classes and risk
factors from it; nothing here computes sensitivities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProductClass(Enum):
    RATES_FX = "RatesFX"
    CREDIT = "Credit"
    EQUITY = "Equity"
    COMMODITY = "Commodity"


class RiskClass(Enum):
    INTEREST_RATE = "InterestRate"
    CREDIT_Q = "CreditQ"
    CREDIT_NON_Q = "CreditNonQ"
    EQUITY = "Equity"
    COMMODITY = "Commodity"
    FX = "FX"


@dataclass(frozen=True)
class SimmCoordinate:
    """One sensitivity key: risk factor qualifier tagged with its classes."""

    qualifier: str
    risk_class: RiskClass
    product_class: ProductClass
    bucket: Optional[str] = None
    vertex: Optional[str] = None


@dataclass(frozen=True)
class IRCurveSpec:
    """Interest-rate curve reference (e.g. name "USD_LIBOR3M", currency "USD")."""

    name: str
    currency: str


@dataclass
class TradeSpecification:
    """
    Trade-level descriptors used by risk aggregation.

    sensitivity_keys is assigned after construction by the caller; this class
    never mutates it.
    """

    notional: float
    maturity: float
    ir_curve: IRCurveSpec
    trade_id: str = ""
    sensitivity_keys: set[SimmCoordinate] = field(default_factory=set)

    @property
    def max_time_to_maturity(self) -> float:
        return self.maturity

    def product_class(self) -> ProductClass:
        """The single product class shared by all sensitivity keys."""
        classes = {key.product_class for key in self.sensitivity_keys}
        if len(classes) != 1:
            raise ValueError(
                "sensitivity keys must share exactly one product class, "
                f"found {sorted(c.value for c in classes)}"
            )
        return classes.pop()

    def risk_classes(self) -> set[RiskClass]:
        return {key.risk_class for key in self.sensitivity_keys}

    def risk_factors(self) -> set[str]:
        """Distinct qualifiers across all sensitivity keys."""
        return {key.qualifier for key in self.sensitivity_keys}

    def sensitivity_keys_at(self, evaluation_time: float) -> set[SimmCoordinate]:
        """Sensitivity keys relevant at evaluation_time; keys do not vary with time."""
        return self.sensitivity_keys
