"""
Path vectors: per-simulation-path values produced by a Monte Carlo model.

A PathVector is a small immutable value type over a one-dimensional float
buffer:
- Length n holds one value per simulated path.
- Length 1 is a deterministic value, broadcast against any other length.
- Binary operations between vectors of different lengths (both > 1) are
  errors, never silently broadcast.

Every operation returns a new PathVector; the backing array is read-only.
"""

from __future__ import annotations

from typing import Union

import numpy as np

Operand = Union["PathVector", float, int]


class PathVector:
    """Immutable vector of per-path values with elementwise arithmetic."""

    __slots__ = ("_values",)

    # Let numpy scalars defer to our reflected operators instead of building
    # object arrays.
    __array_ufunc__ = None

    def __init__(self, values: object) -> None:
        array = np.array(values, dtype=np.float64, ndmin=1)
        if array.ndim != 1:
            raise ValueError(f"PathVector needs 1-d values, got shape {array.shape}")
        if array.size == 0:
            raise ValueError("PathVector needs at least one value")
        array.setflags(write=False)
        self._values = array

    @classmethod
    def constant(cls, value: float) -> PathVector:
        """Deterministic vector (length 1) holding value on every path."""
        return cls([value])

    @classmethod
    def zero(cls) -> PathVector:
        return cls.constant(0.0)

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying values."""
        return self._values

    @property
    def is_deterministic(self) -> bool:
        return self._values.size == 1

    def __len__(self) -> int:
        return self._values.size

    def __repr__(self) -> str:
        return f"PathVector({np.array2string(self._values, threshold=6)})"

    def __array__(self, dtype: object = None, copy: object = None) -> np.ndarray:
        return np.array(self._values, dtype=dtype)

    def _operand(self, other: Operand) -> np.ndarray | float:
        if isinstance(other, PathVector):
            n, m = self._values.size, other._values.size
            if n != m and n != 1 and m != 1:
                raise ValueError(f"path count mismatch: {n} vs {m}")
            return other._values
        if isinstance(other, (int, float, np.floating, np.integer)):
            return float(other)
        return NotImplemented

    def _apply(self, other: Operand, op) -> PathVector:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return PathVector(op(self._values, operand))

    def __add__(self, other: Operand) -> PathVector:
        return self._apply(other, np.add)

    def __radd__(self, other: Operand) -> PathVector:
        return self._apply(other, np.add)

    def __sub__(self, other: Operand) -> PathVector:
        return self._apply(other, np.subtract)

    def __rsub__(self, other: Operand) -> PathVector:
        return self._apply(other, lambda a, b: np.subtract(b, a))

    def __mul__(self, other: Operand) -> PathVector:
        return self._apply(other, np.multiply)

    def __rmul__(self, other: Operand) -> PathVector:
        return self._apply(other, np.multiply)

    def __truediv__(self, other: Operand) -> PathVector:
        return self._apply(other, np.divide)

    def __rtruediv__(self, other: Operand) -> PathVector:
        return self._apply(other, lambda a, b: np.divide(b, a))

    def __neg__(self) -> PathVector:
        return PathVector(-self._values)

    def invert(self) -> PathVector:
        """Elementwise 1 / x."""
        return PathVector(1.0 / self._values)

    def add_ratio(self, numerator: Operand, denominator: Operand) -> PathVector:
        """self + numerator / denominator."""
        return self + numerator / denominator

    def sub_ratio(self, numerator: Operand, denominator: Operand) -> PathVector:
        """self - numerator / denominator."""
        return self - numerator / denominator

    def average(self) -> float:
        """Mean across paths (the Monte Carlo expectation)."""
        return float(np.mean(self._values))

    def to_numpy(self, n_paths: int | None = None) -> np.ndarray:
        """Writable copy of the values, optionally broadcast to n_paths."""
        if n_paths is None or n_paths == self._values.size:
            return self._values.copy()
        if not self.is_deterministic:
            raise ValueError(
                f"cannot broadcast {self._values.size} paths to {n_paths}"
            )
        return np.full(n_paths, self._values[0])
