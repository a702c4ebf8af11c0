# -*- coding: utf-8 -*-
"""
Quartic Window - Fourth-difference interpolation over five samples.

Implements Meeus, Astronomical Algorithms, ch. 3, for a table of five
equally spaced rows. The difference cascade is

    first:  a = y1-y0, b = y2-y1, c = y3-y2, d = y4-y3
    second: e = b-a, f = c-b, g = d-c
    third:  h = f-e, j = g-f
    fourth: k = j-h

and the interpolated value at interpolating factor ``n`` (eq. 3.8) is
the quartic

    y = y2 + n(b+c)/2 + n^2 f/2 + n(n^2-1)(h+j)/12 + n^2(n^2-1)k/24

evaluated here in power form with Horner's method. Extremum (eq. 3.9)
and zero (eqs. 3.10, 3.11) are found by fixed-point iteration from
``n = 0``. Results of the finders are accepted over the whole table,
``|n| <= 2``; the strict interpolation queries accept only the central
half, ``|n| <= 1``, as Meeus recommends (p. 31).

Also provides ``interpolate_midpoint`` (eq. 3.12) for the value half way
between the central rows of a four-row table.

Reference
---------
J. Meeus, "Astronomical Algorithms," 2nd ed., Willmann-Bell, 1998,
ch. 3, pp. 28-32.

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
import math
from typing import Optional, Sequence, Tuple, Union

# AstroInterp internal
from astrointerp.exceptions import (
    ExtremumOutsideTableError,
    ZeroOutsideTableError,
)
from astrointerp.interpolation.base import (
    ArrayLike,
    EquallySpacedWindow,
    horner,
    validate_samples,
)
from astrointerp.iteration import FixedPointIterator
from astrointerp.vocabulary import ZeroStrategy

# Finder results are accepted over the full table
_TABLE_LIMIT = 2.0


class QuarticWindow(EquallySpacedWindow):
    """Interpolation from a table of five equally spaced rows.

    Parameters
    ----------
    x_first : float
        x value corresponding to ``y[0]``.
    x_last : float
        x value corresponding to ``y[4]``. Must differ from
        ``x_first``.
    y : sequence of float
        The five y values.
    iterator : FixedPointIterator, optional
        Iteration engine for :meth:`extremum` and :meth:`zero`.

    Raises
    ------
    ValidationError
        If ``y`` is not length 5 or ``x_last == x_first``.
    """

    arity = 5
    n_scale = 2.0

    def __init__(
        self,
        x_first: float,
        x_last: float,
        y: Sequence[float],
        iterator: Optional[FixedPointIterator] = None,
    ) -> None:
        super().__init__(x_first, x_last, y, iterator=iterator)
        y0, y1, y2, y3, y4 = self._y
        a = y1 - y0
        b = y2 - y1
        c = y3 - y2
        d = y4 - y3
        e = b - a
        f = c - b
        g = d - c
        h = f - e
        j = g - f
        k = j - h
        self._a, self._b, self._c, self._d = a, b, c, d
        self._e, self._f, self._g = e, f, g
        self._h, self._j = h, j
        self._k = k
        # (3.8)
        self._coeffs = (
            y2,
            (b + c) / 2 - (h + j) / 12,
            f / 2 - k / 24,
            (h + j) / 12,
            k / 24,
        )

    @property
    def coefficients(self) -> Tuple[float, ...]:
        """Interpolating polynomial in ``n``, constant term first."""
        return self._coeffs

    @property
    def differences(self) -> Tuple[Tuple[float, ...], ...]:
        """First through fourth differences."""
        return (
            (self._a, self._b, self._c, self._d),
            (self._e, self._f, self._g),
            (self._h, self._j),
            (self._k,),
        )

    def value_at_n(self, n: ArrayLike) -> ArrayLike:
        """Interpolate for interpolating factor ``n`` (eq. 3.8).

        ``n`` is ``x - x_mid`` in units of the tabular interval;
        ``value_at_n(0)`` reproduces the center sample exactly.
        """
        return horner(n, self._coeffs)

    def extremum(self) -> Tuple[float, float]:
        """Return ``(x, y)`` at the extremum of the fitted quartic.

        Raises
        ------
        ExtremumOutsideTableError
            If the iteration denominator ``k - 12f`` is zero, or the
            extremum lies outside ``[x_first, x_last]``.
        ConvergenceError
            If the iteration fails to converge.
        """
        h, j, k = self._h, self._j, self._k
        # (3.9)
        num = (6 * (self._b + self._c) - h - j, 0.0, 3 * (h + j), 2 * k)
        den = k - 12 * self._f
        if den == 0:
            raise ExtremumOutsideTableError("Extremum falls outside of table")

        n = self._iterate(lambda n0: horner(n0, num) / den)
        self._check_inside(
            n, _TABLE_LIMIT, ExtremumOutsideTableError, "Extremum",
        )
        return self.x_for_n(n), horner(n, self._coeffs)

    def zero(self, strategy: Union[ZeroStrategy, bool, str]) -> float:
        """Find an ``x`` where the fitted quartic is zero.

        Parameters
        ----------
        strategy : ZeroStrategy, bool or str
            ``ZeroStrategy.WEAK`` (or ``False``) iterates the closed
            form estimate of eq. 3.10; ``ZeroStrategy.STRONG`` (or
            ``True``) the Newton-style ratio of eq. 3.11.

        Raises
        ------
        ConvergenceError
            If the iteration fails to converge.
        ZeroOutsideTableError
            If the converged zero lies outside the table.
        """
        strategy = self._coerce_strategy(strategy)
        b, c, f, h, j, k = (
            self._b, self._c, self._f, self._h, self._j, self._k,
        )

        if strategy is ZeroStrategy.STRONG:
            # (3.11)
            m = k / 24
            nn = (h + j) / 12
            p = f / 2 - m
            q = (b + c) / 2 - nn
            num = (self._y[2], q, p, nn, m)
            deriv = (q, 2 * p, 3 * nn, 4 * m)

            def improve(n0):
                den = horner(n0, deriv)
                if den == 0:
                    return math.nan
                return n0 - horner(n0, num) / den
        else:
            # (3.10)
            num = (-24 * self._y[2], 0.0, k - 12 * f, -2 * (h + j), -k)
            den = 12 * (b + c) - 2 * (h + j)

            def improve(n0):
                if den == 0:
                    return math.nan
                return horner(n0, num) / den

        n = self._iterate(improve)
        self._check_inside(n, _TABLE_LIMIT, ZeroOutsideTableError, "Zero")
        return self.x_for_n(n)


def interpolate_midpoint(y: Sequence[float]) -> float:
    """Interpolate the center value of a table of four rows (eq. 3.12).

    Returns the value half way between ``y[1]`` and ``y[2]`` of four
    equally spaced rows.

    Raises
    ------
    ValidationError
        If ``y`` is not length 4.
    """
    y0, y1, y2, y3 = validate_samples(y, 4)
    return (9 * (y1 + y2) - y0 - y3) / 16
