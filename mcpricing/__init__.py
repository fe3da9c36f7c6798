"""Monte Carlo valuation of interest-rate cash flows: paths, products, valuers, engine."""

from mcpricing.config import Settings, configure_logging, load_settings
from mcpricing.engine import ValuationEngine, create_default_engine
from mcpricing.exceptions import ModelQueryError
from mcpricing.indices import FixedCoupon, LIBORIndex
from mcpricing.interfaces import Notional, Product, RateIndex, SimulationModel, Valuer
from mcpricing.notionals import AmortizingNotional, ConstantNotional
from mcpricing.paths import PathVector
from mcpricing.products import Leg, Period, ZeroCouponBond, build_leg
from mcpricing.simulation import ForwardRateSimulation
from mcpricing.tradespec import (
    IRCurveSpec,
    ProductClass,
    RiskClass,
    SimmCoordinate,
    TradeSpecification,
)
from mcpricing.valuation import cash_flow_profile, forward_cash_flow, present_value, price
from mcpricing.valuers import BaseValuer, BondValuer, LegValuer, PeriodValuer

__all__ = [
    "SimulationModel",
    "Notional",
    "RateIndex",
    "Product",
    "Valuer",
    "PathVector",
    "ForwardRateSimulation",
    "ModelQueryError",
    "Settings",
    "load_settings",
    "configure_logging",
    "ConstantNotional",
    "AmortizingNotional",
    "LIBORIndex",
    "FixedCoupon",
    "Period",
    "Leg",
    "build_leg",
    "ZeroCouponBond",
    "ValuationEngine",
    "create_default_engine",
    "BaseValuer",
    "PeriodValuer",
    "BondValuer",
    "LegValuer",
    "present_value",
    "forward_cash_flow",
    "price",
    "cash_flow_profile",
    "ProductClass",
    "RiskClass",
    "SimmCoordinate",
    "IRCurveSpec",
    "TradeSpecification",
]
