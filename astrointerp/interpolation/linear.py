# -*- coding: utf-8 -*-
"""
Linear Interpolation - Two-point interpolation into an equally spaced table.

For use where only coarse accuracy is required. The bracketing pair of
rows is located by integer division of ``x - x_first`` by the table
spacing, clamped to the valid range so that arguments outside the
table extrapolate along the first or last pair.

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
from typing import Sequence

# Third-party
import numpy as np

# AstroInterp internal
from astrointerp.exceptions import ValidationError
from astrointerp.interpolation.base import (
    ArrayLike,
    Interpolator,
    table_spacing,
    validate_samples,
)


def _interpolate(
    x: ArrayLike,
    x_first: float,
    interval: float,
    y: np.ndarray,
) -> ArrayLike:
    xa = np.asarray(x, dtype=float)
    if not np.all(np.isfinite(xa)):
        raise ValidationError(f"Argument x must be finite, got {x!r}")
    nearest = np.floor((xa - x_first) / interval)
    nearest = np.clip(nearest, 0, len(y) - 2).astype(int)
    x0 = x_first + nearest * interval
    y0, y1 = y[nearest], y[nearest + 1]
    result = y0 + (y1 - y0) * (xa - x0) / interval
    if result.ndim == 0:
        return float(result)
    return result


def linear_interpolate(
    x: ArrayLike,
    x_first: float,
    x_last: float,
    y: Sequence[float],
) -> ArrayLike:
    """Linearly interpolate an equally spaced table at ``x``.

    Parameters
    ----------
    x : float or np.ndarray
        Interpolation argument(s).
    x_first : float
        x value corresponding to ``y[0]``.
    x_last : float
        x value corresponding to ``y[-1]``.
    y : sequence of float
        All y values of the table; at least 2.

    Returns
    -------
    float or np.ndarray
        Interpolated value(s), same shape as ``x``.

    Raises
    ------
    ValidationError
        If the table has fewer than 2 rows, its spacing is zero, or
        ``x`` is not finite.
    """
    samples = np.asarray(validate_samples(y))
    interval = table_spacing(x_first, x_last, len(samples))
    return _interpolate(x, x_first, interval, samples)


class LinearWindow(Interpolator):
    """Linear interpolation over a full equally spaced table.

    Parameters
    ----------
    x_first : float
        x value corresponding to ``y[0]``.
    x_last : float
        x value corresponding to ``y[-1]``.
    y : sequence of float
        All y values of the table; at least 2.

    Raises
    ------
    ValidationError
        If the table has fewer than 2 rows or its spacing is zero.
    """

    def __init__(
        self,
        x_first: float,
        x_last: float,
        y: Sequence[float],
    ) -> None:
        self._y = np.asarray(validate_samples(y))
        self._x_first = float(x_first)
        self._x_last = float(x_last)
        self._interval = table_spacing(x_first, x_last, len(self._y))

    @property
    def interval(self) -> float:
        return self._interval

    def value_at(self, x: ArrayLike) -> ArrayLike:
        """Interpolate the table at ``x``."""
        return _interpolate(x, self._x_first, self._interval, self._y)

    def __repr__(self) -> str:
        return (
            f"LinearWindow(x_first={self._x_first!r}, "
            f"x_last={self._x_last!r}, n_rows={len(self._y)})"
        )
