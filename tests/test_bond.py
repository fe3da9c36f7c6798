"""Tests for ZeroCouponBond."""

import numpy as np
import pytest

from mcpricing.exceptions import ModelQueryError
from mcpricing.products.bond import ZeroCouponBond
from mcpricing.valuation import forward_cash_flow, present_value, price


def test_unit_payoff_at_maturity(stochastic_model) -> None:
    pv = present_value(ZeroCouponBond(maturity=2.0), 2.0, stochastic_model)
    np.testing.assert_allclose(pv.values, 1.0)


def test_zero_after_maturity(stochastic_model) -> None:
    pv = present_value(ZeroCouponBond(maturity=2.0), 2.5, stochastic_model)
    assert pv.is_deterministic
    assert pv.values[0] == 0.0


def test_bond_discounts_with_compounded_forwards(flat_model) -> None:
    """Flat 3% semiannual forwards: P(0, 2) = 1.015^-4."""
    bond = ZeroCouponBond(maturity=2.0)
    np.testing.assert_allclose(present_value(bond, 0.0, flat_model).values, 1.015**-4)
    assert price(bond, flat_model) == pytest.approx(1.015**-4)


def test_bond_value_is_measurable_at_evaluation_time(stochastic_model) -> None:
    """P(t, T) uses only forwards observed at t, so it varies across paths for t > 0."""
    pv = present_value(ZeroCouponBond(maturity=3.0), 1.0, stochastic_model)
    assert len(pv) == stochastic_model.n_paths
    assert np.all(pv.values < 1.0)
    assert np.std(pv.values) > 0.0


def test_bond_forward_cash_flow(stochastic_model) -> None:
    bond = ZeroCouponBond(maturity=2.0)
    cf = forward_cash_flow(bond, 0.5, 2.5, stochastic_model)
    expected = stochastic_model.numeraire(0.5).values / stochastic_model.numeraire(2.0).values
    np.testing.assert_allclose(cf.values, expected)
    assert forward_cash_flow(bond, 0.5, 1.5, stochastic_model).values[0] == 0.0
    assert forward_cash_flow(bond, 2.0, 3.0, stochastic_model).values[0] == 0.0


def test_maturity_off_tenor_raises(flat_model) -> None:
    with pytest.raises(ModelQueryError, match="tenor"):
        present_value(ZeroCouponBond(maturity=1.2), 0.0, flat_model)
