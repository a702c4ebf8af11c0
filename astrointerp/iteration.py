# -*- coding: utf-8 -*-
"""
Iteration - Bounded fixed-point iteration and root bracketing.

``FixedPointIterator`` is the shared engine behind the zero and extremum
finders of the equally spaced interpolation windows. It repeatedly
applies an improvement function until two successive estimates agree
to a relative tolerance, and reports failure through its return value
rather than by raising, leaving the caller to decide whether
non-convergence is fatal.

The remaining helpers follow Meeus, Astronomical Algorithms, ch. 5:

- ``decimal_places`` — iterate to a fixed number of decimal places.
- ``full_precision`` — iterate to (nearly) the full precision of a
  float64.
- ``binary_root`` — bisection between two bounds.

Unlike ``FixedPointIterator.iterate``, the first two raise
``ConvergenceError`` when the iteration limit is reached.

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
from typing import Callable, Tuple

# AstroInterp internal
from astrointerp.exceptions import ConvergenceError, ValidationError

logger = logging.getLogger(__name__)


MAX_ITERATIONS = 50
"""Default iteration cap for ``FixedPointIterator``."""

RELATIVE_TOLERANCE = 1e-15
"""Default relative convergence tolerance for ``FixedPointIterator``."""

# 15 significant figures, a couple of bits shy of float64 precision
_FULL_PRECISION = 1e-15

# Halvings needed to exhaust a float64 mantissa
_BISECTIONS = 52


def _apply(better: Callable[[float], float], value: float) -> float:
    """Apply an improvement step; float overflow yields infinity."""
    try:
        return better(value)
    except OverflowError:
        return math.inf


def _converged(current: float, nxt: float, tolerance: float) -> bool:
    """Relative agreement test. Exact equality covers a fixed point at 0."""
    if nxt == current:
        return True
    return abs(nxt - current) < tolerance * abs(current)


class FixedPointIterator:
    """Bounded fixed-point iteration.

    Parameters
    ----------
    max_iterations : int
        Maximum number of applications of the improvement function.
        Must be >= 1. Default ``MAX_ITERATIONS`` (50).
    tolerance : float
        Relative tolerance: iteration stops successfully once
        ``|next - current| < tolerance * |current|``. Must be positive
        and finite. Default ``RELATIVE_TOLERANCE`` (1e-15).

    Examples
    --------
    >>> it = FixedPointIterator()
    >>> root, ok = it.iterate(1.0, lambda n: (n + 2.0 / n) / 2)
    """

    __slots__ = ('_max_iterations', '_tolerance')

    def __init__(
        self,
        max_iterations: int = MAX_ITERATIONS,
        tolerance: float = RELATIVE_TOLERANCE,
    ) -> None:
        if not isinstance(max_iterations, int) or max_iterations < 1:
            raise ValidationError(
                f"max_iterations must be an integer >= 1, "
                f"got {max_iterations!r}"
            )
        if not math.isfinite(tolerance) or tolerance <= 0:
            raise ValidationError(
                f"tolerance must be positive and finite, got {tolerance!r}"
            )
        self._max_iterations = max_iterations
        self._tolerance = float(tolerance)

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def iterate(
        self,
        initial: float,
        improve: Callable[[float], float],
    ) -> Tuple[float, bool]:
        """Iterate ``improve`` from ``initial`` until convergence.

        Parameters
        ----------
        initial : float
            Starting estimate.
        improve : callable
            Maps the current estimate to an improved one.

        Returns
        -------
        tuple of (float, bool)
            The last estimate and whether it converged. A non-finite
            value from ``improve``, or an ``OverflowError`` raised by it,
            ends the iteration immediately with ``converged=False`` and
            the last finite estimate.
        """
        current = initial
        for step in range(self._max_iterations):
            nxt = _apply(improve, current)
            if not math.isfinite(nxt):
                logger.debug(
                    "Non-finite estimate %r at step %d from %r",
                    nxt, step + 1, current,
                )
                return current, False
            if _converged(current, nxt, self._tolerance):
                return nxt, True
            current = nxt
        logger.debug(
            "No convergence after %d iterations (last estimate %r)",
            self._max_iterations, current,
        )
        return current, False

    def __repr__(self) -> str:
        return (
            f"FixedPointIterator(max_iterations={self._max_iterations}, "
            f"tolerance={self._tolerance!r})"
        )


DEFAULT_ITERATOR = FixedPointIterator()


def iterate(
    initial: float,
    improve: Callable[[float], float],
) -> Tuple[float, bool]:
    """Iterate with the default limits. See :meth:`FixedPointIterator.iterate`."""
    return DEFAULT_ITERATOR.iterate(initial, improve)


def decimal_places(
    better: Callable[[float], float],
    start: float,
    places: int,
    max_iterations: int,
) -> float:
    """Iterate to a fixed number of decimal places.

    Parameters
    ----------
    better : callable
        Improvement function.
    start : float
        Starting value.
    places : int
        Number of decimal places required in the result.
    max_iterations : int
        Iteration limit.

    Returns
    -------
    float
        First estimate that differs from its predecessor by less than
        ``10**-places``.

    Raises
    ------
    ConvergenceError
        If the iteration limit is reached or an estimate is not finite.
    """
    d = 10.0 ** -places
    for _ in range(max_iterations):
        n = _apply(better, start)
        if not math.isfinite(n):
            raise ConvergenceError(f"Iteration diverged from {start!r}")
        if abs(n - start) < d:
            return n
        start = n
    raise ConvergenceError("Maximum iterations reached")


def full_precision(
    better: Callable[[float], float],
    start: float,
    max_iterations: int,
) -> float:
    """Iterate to 15 significant figures.

    Raises
    ------
    ConvergenceError
        If the iteration limit is reached or an estimate is not finite.
    """
    for _ in range(max_iterations):
        n = _apply(better, start)
        if not math.isfinite(n):
            raise ConvergenceError(f"Iteration diverged from {start!r}")
        if n == start or abs(n - start) < _FULL_PRECISION * abs(n):
            return n
        start = n
    raise ConvergenceError("Maximum iterations reached")


def binary_root(
    f: Callable[[float], float],
    lower: float,
    upper: float,
) -> float:
    """Find a root of ``f`` between ``lower`` and ``upper`` by bisection.

    A root must exist between the bounds (``f`` changes sign), otherwise
    the result is not meaningful.
    """
    y_lower = f(lower)
    mid = 0.0
    for _ in range(_BISECTIONS):
        mid = (lower + upper) / 2
        y_mid = f(mid)
        if y_mid == 0:
            break
        if (y_lower < 0) == (y_mid < 0):
            lower = mid
            y_lower = y_mid
        else:
            upper = mid
    return mid
