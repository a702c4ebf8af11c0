# -*- coding: utf-8 -*-
"""
Lagrange Interpolation - Interpolation with unequally spaced abscissae.

Implements the classical Lagrange interpolation formula (Meeus,
Astronomical Algorithms, eq. 3.12 and the BASIC program of p. 33):

    y(x) = sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)

and the construction of the interpolating polynomial itself, which the
text needs for the numerical solution of example 3.g but does not
describe. X values need not be equally spaced nor in order; they must
be distinct. Distinctness is the caller's obligation and is not
checked: coincident abscissae divide by zero.

Reference
---------
J. Meeus, "Astronomical Algorithms," 2nd ed., Willmann-Bell, 1998,
ch. 3, pp. 32-35.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Sequence, Tuple

# Third-party
import numpy as np

# AstroInterp internal
from astrointerp.exceptions import ValidationError
from astrointerp.interpolation.base import ArrayLike, Interpolator


class LagrangeInterpolator(Interpolator):
    """Lagrange interpolator over an arbitrary table of ``(x, y)`` rows.

    Evaluation is O(N^2) per argument and keeps no state beyond the
    samples. At every tabulated ``x_i`` the interpolator returns
    ``y_i`` exactly.

    Parameters
    ----------
    table : sequence of (float, float) or np.ndarray
        Rows ``[(x0, y0), ..., (xN, yN)]``, or an array of shape
        ``(N, 2)``. At least one row; x values must be distinct.

    Raises
    ------
    ValidationError
        If ``table`` is empty or its rows are not pairs.

    Examples
    --------
    >>> interp = LagrangeInterpolator([(1, -6), (3, 6), (4, 9), (6, 15)])
    >>> interp.value_at(2.0)
    """

    def __init__(self, table: Sequence[Tuple[float, float]]) -> None:
        try:
            arr = np.asarray(table, dtype=float)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"table must be a sequence of (x, y) pairs: {exc}"
            ) from exc
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValidationError(
                f"table must have shape (N, 2), got {arr.shape}"
            )
        if arr.shape[0] < 1:
            raise ValidationError("table must have at least one row")
        self._x = tuple(float(v) for v in arr[:, 0])
        self._y = tuple(float(v) for v in arr[:, 1])

    @classmethod
    def from_xy(
        cls,
        x: Sequence[float],
        y: Sequence[float],
    ) -> 'LagrangeInterpolator':
        """Build from separate x and y sequences of equal length."""
        if len(x) != len(y):
            raise ValidationError(
                f"x and y must have equal length, got {len(x)} and {len(y)}"
            )
        return cls(list(zip(x, y)))

    @property
    def x(self) -> Tuple[float, ...]:
        return self._x

    @property
    def y(self) -> Tuple[float, ...]:
        return self._y

    def __len__(self) -> int:
        return len(self._x)

    def value_at(self, x: ArrayLike) -> ArrayLike:
        """Interpolate a y value for argument ``x``.

        Parameters
        ----------
        x : float or np.ndarray
            Interpolation argument(s).

        Returns
        -------
        float or np.ndarray
            Interpolated value(s), same shape as ``x``.
        """
        xs, ys = self._x, self._y
        total = 0.0
        for i, xi in enumerate(xs):
            prod = 1.0
            for j, xj in enumerate(xs):
                if i != j:
                    prod = prod * ((x - xj) / (xi - xj))
            total = total + ys[i] * prod
        return total

    def as_polynomial(self) -> np.ndarray:
        """Construct the interpolating polynomial.

        The polynomial has degree N-1 for N rows. Coefficients are
        accumulated basis by basis: each basis numerator
        ``prod_{j != i} (x - x_j)`` is built by repeated synthetic
        multiplication, then scaled by ``y_i / prod_{j != i}(x_i - x_j)``.

        Returns
        -------
        np.ndarray
            Coefficients, constant term first, shape ``(N,)``. Evaluate
            with :func:`astrointerp.interpolation.horner`.
        """
        xs, ys = self._x, self._y
        size = len(xs)
        last = size - 1
        total = np.zeros(size)
        prod = np.zeros(size)

        for i, xi in enumerate(xs):
            prod[:] = 0.0
            prod[last] = 1.0
            den = 1.0
            n = last
            for j, xj in enumerate(xs):
                if i == j:
                    continue
                # multiply the partial product by (x - xj)
                prod[n - 1] = prod[n] * -xj
                for k in range(n, last):
                    prod[k] -= prod[k + 1] * xj
                n -= 1
                den *= xi - xj
            total += ys[i] * prod / den

        return total

    def __repr__(self) -> str:
        return f"LagrangeInterpolator(n_rows={len(self._x)})"


def lagrange_interpolator(
    table: Sequence[Tuple[float, float]],
) -> LagrangeInterpolator:
    """Create a Lagrange interpolator.

    Convenience factory function. See :class:`LagrangeInterpolator`
    for full documentation.

    Parameters
    ----------
    table : sequence of (float, float)
        Rows ``[(x0, y0), ..., (xN, yN)]`` with distinct x.

    Returns
    -------
    LagrangeInterpolator
        Callable interpolator.
    """
    return LagrangeInterpolator(table)
