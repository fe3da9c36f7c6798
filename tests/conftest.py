"""Shared simulation factories for tests."""

import numpy as np
import pytest

from mcpricing.simulation import ForwardRateSimulation

TENOR = [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0]


def make_flat_simulation(
    rate: float = 0.03,
    numeraire: float = 1.0,
    n_paths: int = 1,
    tenor_times: list[float] = TENOR,
) -> ForwardRateSimulation:
    """Every forward equal to rate, numeraire constant, on every path."""
    times = np.array(tenor_times)
    n_periods = len(tenor_times) - 1
    return ForwardRateSimulation(
        times=times,
        tenor_times=times,
        forward_rates=np.full((times.size, n_periods, n_paths), rate),
        numeraire_values=np.full((times.size, n_paths), numeraire),
    )


def make_stochastic_simulation(n_paths: int = 200, seed: int = 7) -> ForwardRateSimulation:
    """
    Lognormal forwards on the tenor grid with the spot-LIBOR numeraire.

    N(T_0) = 1 and N(T_{k+1}) = N(T_k) (1 + L_k(T_k) dT), so a floating
    period with notional exchange is worth exactly zero before it starts.
    """
    rng = np.random.default_rng(seed)
    times = np.array(TENOR)
    n_periods = times.size - 1
    forwards = np.empty((times.size, n_periods, n_paths))
    forwards[0] = (0.03 + 0.002 * np.arange(n_periods))[:, None]
    vol = 0.2
    for k in range(1, times.size):
        dt = times[k] - times[k - 1]
        shocks = rng.standard_normal((n_periods, n_paths))
        forwards[k] = forwards[k - 1] * np.exp(vol * np.sqrt(dt) * shocks - 0.5 * vol**2 * dt)
    numeraire = np.ones((times.size, n_paths))
    for k in range(1, times.size):
        accrual = times[k] - times[k - 1]
        numeraire[k] = numeraire[k - 1] * (1.0 + forwards[k - 1, k - 1] * accrual)
    return ForwardRateSimulation(
        times=times,
        tenor_times=times,
        forward_rates=forwards,
        numeraire_values=numeraire,
    )


@pytest.fixture
def flat_model() -> ForwardRateSimulation:
    return make_flat_simulation(n_paths=3)


@pytest.fixture
def stochastic_model() -> ForwardRateSimulation:
    return make_stochastic_simulation()


@pytest.fixture
def flat_simulation():
    """Factory fixture: flat_simulation(rate=..., numeraire=..., n_paths=...)."""
    return make_flat_simulation
