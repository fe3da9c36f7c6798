"""Valuer implementations for the registry-based valuation engine."""

from mcpricing.valuers.base import BaseValuer
from mcpricing.valuers.bond_valuer import BondValuer
from mcpricing.valuers.leg_valuer import LegValuer
from mcpricing.valuers.period_valuer import PeriodValuer

__all__ = [
    "BaseValuer",
    "BondValuer",
    "LegValuer",
    "PeriodValuer",
]
