"""
Container for simulated forward-rate paths.

ForwardRateSimulation holds the output of an external forward-rate (LIBOR
market) model simulation and answers the SimulationModel queries:
- `times` is the simulation time grid (strictly increasing).
- `tenor_times` is the tenor structure T_0 < T_1 < ... < T_n of the forwards.
- `forward_rates[k, i, p]` is the forward L_i for [T_i, T_{i+1}] at times[k]
  on path p.
- `numeraire[k, p]` is the numeraire at times[k] on path p.

A single path (n_paths = 1) describes a deterministic model.

Conventions:
- A forward freezes at its own fixing: L_i observed at t > T_i is L_i(T_i).
- Forwards are read at the last grid time not after the observation time.
- The numeraire is interpolated log-linearly between grid times.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from mcpricing.config import load_settings
from mcpricing.exceptions import ModelQueryError
from mcpricing.paths import PathVector

logger = logging.getLogger(__name__)


def _default_tolerance() -> float:
    return load_settings().time_tolerance


@dataclass(eq=False)
class ForwardRateSimulation:
    """
    Simulated forward rates on a tenor structure plus the numeraire.

    Implements SimulationModel protocol structurally (no explicit inheritance).
    Arrays are copied and made read-only on construction.
    """

    times: np.ndarray
    tenor_times: np.ndarray
    forward_rates: np.ndarray
    numeraire_values: np.ndarray
    time_tolerance: float = field(default_factory=_default_tolerance)

    def __post_init__(self) -> None:
        for name in ("times", "tenor_times", "forward_rates", "numeraire_values"):
            array = np.array(getattr(self, name), dtype=np.float64)
            array.setflags(write=False)
            setattr(self, name, array)
        self._validate()
        logger.debug(
            "simulation with %d times, %d tenor periods, %d paths",
            self.times.size,
            self.tenor_times.size - 1,
            self.n_paths,
        )

    def _validate(self) -> None:
        if self.times.ndim != 1 or self.times.size == 0:
            raise ValueError("times must be a non-empty 1-d array")
        if self.tenor_times.ndim != 1 or self.tenor_times.size < 2:
            raise ValueError("tenor_times must hold at least two times")
        if np.any(np.diff(self.times) <= 0):
            raise ValueError("times must be strictly increasing")
        if np.any(np.diff(self.tenor_times) <= 0):
            raise ValueError("tenor_times must be strictly increasing")
        if self.numeraire_values.ndim != 2 or self.numeraire_values.shape[0] != self.times.size:
            raise ValueError("numeraire_values must have shape (n_times, n_paths)")
        expected = (self.times.size, self.tenor_times.size - 1, self.n_paths)
        if self.forward_rates.shape != expected:
            raise ValueError(
                f"forward_rates must have shape {expected}, got {self.forward_rates.shape}"
            )
        if np.any(self.numeraire_values <= 0):
            raise ValueError("numeraire_values must be positive")

    @property
    def n_paths(self) -> int:
        return self.numeraire_values.shape[1]

    def _check_horizon(self, time: float) -> None:
        tol = self.time_tolerance
        if time < self.times[0] - tol or time > self.times[-1] + tol:
            raise ModelQueryError(
                f"time {time} outside simulated horizon "
                f"[{self.times[0]}, {self.times[-1]}]"
            )

    def time_index(self, time: float) -> int:
        """Index of the last grid time not after time."""
        self._check_horizon(time)
        index = int(np.searchsorted(self.times, time + self.time_tolerance, side="right")) - 1
        return max(index, 0)

    def tenor_index(self, time: float) -> int:
        """Index of time on the tenor structure; raises if time is not a tenor date."""
        index = int(np.searchsorted(self.tenor_times, time - self.time_tolerance))
        if index == self.tenor_times.size or abs(self.tenor_times[index] - time) > self.time_tolerance:
            raise ModelQueryError(f"time {time} is not on the tenor structure")
        return index

    def numeraire(self, time: float) -> PathVector:
        """Numeraire at time; log-linear in time between grid points."""
        self._check_horizon(time)
        upper = int(np.searchsorted(self.times, time - self.time_tolerance))
        upper = min(upper, self.times.size - 1)
        if abs(self.times[upper] - time) <= self.time_tolerance:
            return PathVector(self.numeraire_values[upper])
        lower = upper - 1
        t0, t1 = self.times[lower], self.times[upper]
        weight = (time - t0) / (t1 - t0)
        log_numeraire = (1.0 - weight) * np.log(self.numeraire_values[lower]) + weight * np.log(
            self.numeraire_values[upper]
        )
        return PathVector(np.exp(log_numeraire))

    def forward_rate(
        self, fixing_time: float, period_start: float, period_end: float
    ) -> PathVector:
        r"""
        Forward rate for [period_start, period_end] as of fixing_time.

        Both ends must be tenor dates. The rate compounds the tenor forwards:
        1 + L (T_e - T_s) = prod_i (1 + L_i (T_{i+1} - T_i)).
        """
        start = self.tenor_index(period_start)
        end = self.tenor_index(period_end)
        if end < start:
            raise ModelQueryError(
                f"period_end {period_end} before period_start {period_start}"
            )
        if end == start:
            return PathVector.zero()
        growth = np.ones(self.n_paths)
        for i in range(start, end):
            tenor_start = self.tenor_times[i]
            k = self.time_index(min(fixing_time, tenor_start))
            accrual = self.tenor_times[i + 1] - tenor_start
            growth = growth * (1.0 + self.forward_rates[k, i] * accrual)
        length = self.tenor_times[end] - self.tenor_times[start]
        return PathVector((growth - 1.0) / length)
