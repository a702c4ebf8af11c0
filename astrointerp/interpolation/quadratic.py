# -*- coding: utf-8 -*-
"""
Quadratic Window - Second-difference interpolation over three samples.

Implements Meeus, Astronomical Algorithms, ch. 3, for a table of three
equally spaced rows. With first differences ``a = y1 - y0``,
``b = y2 - y1`` and second difference ``c = b - a``, the interpolated
value at interpolating factor ``n`` (eq. 3.3) is:

    y = y1 + n/2 * (a + b + n*c)

The extremum of the fitted parabola lies at (eqs. 3.4, 3.5):

    n_m = -(a + b) / (2c),    y_m = y1 - (a + b)^2 / (8c)

Zeros are found by fixed-point iteration from ``n = 0`` using either a
quick estimate (eq. 3.6) or a Newton-style correction (eq. 3.7).

Since the x values are equidistant only the first and last are given;
the interior x is implicit. Meeus notes the importance of choosing the
three rows of a larger table that minimize ``n``; ``select_for_x``
does this.

Reference
---------
J. Meeus, "Astronomical Algorithms," 2nd ed., Willmann-Bell, 1998,
ch. 3, pp. 23-27.

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
import logging
import math
from typing import Optional, Sequence, Tuple, Union

# AstroInterp internal
from astrointerp.exceptions import (
    ExtremumOutsideTableError,
    NoExtremumError,
    ValidationError,
    ZeroOutsideTableError,
)
from astrointerp.interpolation.base import (
    ArrayLike,
    EquallySpacedWindow,
    table_spacing,
)
from astrointerp.iteration import FixedPointIterator
from astrointerp.vocabulary import ZeroStrategy

logger = logging.getLogger(__name__)


class QuadraticWindow(EquallySpacedWindow):
    """Interpolation from a table of three equally spaced rows.

    Parameters
    ----------
    x_first : float
        x value corresponding to ``y[0]``.
    x_last : float
        x value corresponding to ``y[2]``. Must differ from
        ``x_first``.
    y : sequence of float
        The three y values.
    iterator : FixedPointIterator, optional
        Iteration engine for :meth:`zero`.

    Raises
    ------
    ValidationError
        If ``y`` is not length 3 or ``x_last == x_first``.

    Examples
    --------
    >>> w = QuadraticWindow(7, 9, [0.884226, 0.877366, 0.870531])
    >>> y = w.value_at_x(8.18125)
    """

    arity = 3
    n_scale = 1.0

    def __init__(
        self,
        x_first: float,
        x_last: float,
        y: Sequence[float],
        iterator: Optional[FixedPointIterator] = None,
    ) -> None:
        super().__init__(x_first, x_last, y, iterator=iterator)
        y0, y1, y2 = self._y
        # differences (3.1)
        self._a = y1 - y0
        self._b = y2 - y1
        self._c = self._b - self._a
        self._ab_sum = self._a + self._b

    @property
    def differences(self) -> Tuple[float, float, float]:
        """First differences ``a``, ``b`` and second difference ``c``."""
        return self._a, self._b, self._c

    def value_at_n(self, n: ArrayLike) -> ArrayLike:
        """Interpolate for interpolating factor ``n`` (eq. 3.3).

        ``n`` is ``x - x_mid`` in units of the tabular interval;
        ``value_at_n(0)`` reproduces the middle sample exactly.
        """
        return self._y[1] + n * 0.5 * (self._ab_sum + n * self._c)

    def extremum(self) -> Tuple[float, float]:
        """Return ``(x, y)`` at the extremum of the fitted parabola.

        Raises
        ------
        NoExtremumError
            If the second difference is zero (the fit is linear).
        ExtremumOutsideTableError
            If the extremum lies outside ``[x_first, x_last]``.
        """
        if self._c == 0:
            raise NoExtremumError("No extremum in table")
        n = self._ab_sum / (-2 * self._c)  # (3.5)
        self._check_inside(n, 1.0, ExtremumOutsideTableError, "Extremum")
        y = self._y[1] - self._ab_sum * self._ab_sum / (8 * self._c)  # (3.4)
        return self.x_for_n(n), y

    def zero(self, strategy: Union[ZeroStrategy, bool, str]) -> float:
        """Find an ``x`` where the fitted parabola is zero.

        Parameters
        ----------
        strategy : ZeroStrategy, bool or str
            ``ZeroStrategy.WEAK`` (or ``False``) iterates the quick
            estimate of eq. 3.6; ``ZeroStrategy.STRONG`` (or ``True``)
            the Newton-style correction of eq. 3.7.

        Returns
        -------
        float
            The zero, within ``[x_first, x_last]``.

        Raises
        ------
        ConvergenceError
            If the iteration fails to converge.
        ZeroOutsideTableError
            If the converged zero lies outside the table.
        """
        strategy = self._coerce_strategy(strategy)
        y1 = self._y[1]
        ab = self._ab_sum
        c = self._c

        if strategy is ZeroStrategy.STRONG:
            def improve(n0):
                # (3.7)
                den = ab + 2 * c * n0
                if den == 0:
                    return math.nan
                return n0 - (2 * y1 + n0 * (ab + c * n0)) / den
        else:
            def improve(n0):
                # (3.6)
                den = ab + c * n0
                if den == 0:
                    return math.nan
                return -2 * y1 / den

        n = self._iterate(improve)
        self._check_inside(n, 1.0, ZeroOutsideTableError, "Zero")
        return self.x_for_n(n)


def select_for_x(
    x: float,
    x_first: float,
    x_last: float,
    y: Sequence[float],
    iterator: Optional[FixedPointIterator] = None,
) -> QuadraticWindow:
    """Build a ``QuadraticWindow`` on the three rows nearest ``x``.

    Unlike the ``QuadraticWindow`` constructor the table is not limited
    to three rows. The row nearest ``x`` becomes the middle of the
    window, clamped so that a full window exists, which keeps the
    interpolating factor small.

    Parameters
    ----------
    x : float
        Interpolation target.
    x_first : float
        x value corresponding to ``y[0]``.
    x_last : float
        x value corresponding to ``y[-1]``.
    y : sequence of float
        All y values of the table; at least 3.
    iterator : FixedPointIterator, optional
        Passed through to the window.

    Returns
    -------
    QuadraticWindow

    Raises
    ------
    ValidationError
        If ``x`` is not finite, the implied table spacing is zero or
        the table has fewer than three rows.
    """
    if not math.isfinite(x):
        raise ValidationError(f"Argument x must be finite, got {x!r}")
    y = list(y)
    if len(y) <= 3:
        return QuadraticWindow(x_first, x_last, y, iterator=iterator)

    interval = table_spacing(x_first, x_last, len(y))
    nearest = math.trunc((x - x_first) / interval + 0.5)
    nearest = min(max(nearest, 1), len(y) - 2)
    logger.debug(
        "Selected rows %d-%d of %d for x=%r",
        nearest - 1, nearest + 1, len(y), x,
    )
    return QuadraticWindow(
        x_first + (nearest - 1) * interval,
        x_first + (nearest + 1) * interval,
        y[nearest - 1:nearest + 2],
        iterator=iterator,
    )
