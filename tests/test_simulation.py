"""Tests for ForwardRateSimulation."""

import math

import numpy as np
import pytest

from mcpricing.exceptions import ModelQueryError
from mcpricing.interfaces import SimulationModel
from mcpricing.simulation import ForwardRateSimulation


def _two_period_simulation() -> ForwardRateSimulation:
    """Times 0, 1, 2; two yearly forwards; two paths."""
    forwards = np.array(
        [
            [[0.02, 0.02], [0.03, 0.03]],
            [[0.025, 0.015], [0.035, 0.025]],
            [[0.9, 0.9], [0.04, 0.02]],
        ]
    )
    numeraire = np.array([[1.0, 1.0], [1.02, 1.02], [1.055, 1.0455]])
    return ForwardRateSimulation(
        times=[0.0, 1.0, 2.0],
        tenor_times=[0.0, 1.0, 2.0],
        forward_rates=forwards,
        numeraire_values=numeraire,
    )


def test_satisfies_protocol() -> None:
    assert isinstance(_two_period_simulation(), SimulationModel)


def test_numeraire_on_grid_and_interpolated() -> None:
    sim = _two_period_simulation()
    np.testing.assert_allclose(sim.numeraire(1.0).values, [1.02, 1.02])
    np.testing.assert_allclose(sim.numeraire(0.5).values, math.sqrt(1.02))
    np.testing.assert_allclose(sim.numeraire(2.0).values, [1.055, 1.0455])


def test_queries_outside_horizon_raise() -> None:
    sim = _two_period_simulation()
    with pytest.raises(ModelQueryError, match="horizon"):
        sim.numeraire(2.5)
    with pytest.raises(ModelQueryError, match="horizon"):
        sim.numeraire(-0.1)


def test_forward_rate_as_of_fixing_time() -> None:
    sim = _two_period_simulation()
    np.testing.assert_allclose(sim.forward_rate(0.0, 1.0, 2.0).values, [0.03, 0.03])
    np.testing.assert_allclose(sim.forward_rate(0.5, 1.0, 2.0).values, [0.03, 0.03])
    np.testing.assert_allclose(sim.forward_rate(1.0, 1.0, 2.0).values, [0.035, 0.025])


def test_forward_rate_freezes_at_its_fixing() -> None:
    """Observed after T_1 the forward L_1 keeps its value at T_1."""
    sim = _two_period_simulation()
    np.testing.assert_allclose(sim.forward_rate(2.0, 1.0, 2.0).values, [0.035, 0.025])
    np.testing.assert_allclose(sim.forward_rate(2.0, 0.0, 1.0).values, [0.02, 0.02])


def test_forward_rate_compounds_tenor_periods() -> None:
    sim = _two_period_simulation()
    expected = (1.02 * 1.03 - 1.0) / 2.0
    np.testing.assert_allclose(sim.forward_rate(0.0, 0.0, 2.0).values, expected)


def test_forward_rate_empty_period_is_zero() -> None:
    assert _two_period_simulation().forward_rate(1.0, 1.0, 1.0).values[0] == 0.0


def test_forward_rate_off_tenor_raises() -> None:
    sim = _two_period_simulation()
    with pytest.raises(ModelQueryError, match="tenor"):
        sim.forward_rate(0.0, 0.5, 1.0)
    with pytest.raises(ModelQueryError, match="before"):
        sim.forward_rate(0.0, 2.0, 1.0)


def test_arrays_are_read_only() -> None:
    sim = _two_period_simulation()
    with pytest.raises(ValueError):
        sim.numeraire_values[0, 0] = 2.0


def test_shape_validation() -> None:
    with pytest.raises(ValueError, match="forward_rates"):
        ForwardRateSimulation(
            times=[0.0, 1.0],
            tenor_times=[0.0, 1.0],
            forward_rates=np.zeros((2, 2, 1)),
            numeraire_values=np.ones((2, 1)),
        )
    with pytest.raises(ValueError, match="numeraire_values"):
        ForwardRateSimulation(
            times=[0.0, 1.0],
            tenor_times=[0.0, 1.0],
            forward_rates=np.zeros((2, 1, 1)),
            numeraire_values=np.ones((3, 1)),
        )
    with pytest.raises(ValueError, match="strictly increasing"):
        ForwardRateSimulation(
            times=[1.0, 0.0],
            tenor_times=[0.0, 1.0],
            forward_rates=np.zeros((2, 1, 1)),
            numeraire_values=np.ones((2, 1)),
        )
    with pytest.raises(ValueError, match="positive"):
        ForwardRateSimulation(
            times=[0.0, 1.0],
            tenor_times=[0.0, 1.0],
            forward_rates=np.zeros((2, 1, 1)),
            numeraire_values=np.zeros((2, 1)),
        )


def test_time_tolerance_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("MCPRICING_TIME_TOLERANCE", "1e-6")
    sim = _two_period_simulation()
    assert sim.time_tolerance == 1e-6
    np.testing.assert_allclose(sim.forward_rate(0.0, 1.0 + 1e-7, 2.0).values, [0.03, 0.03])
