# -*- coding: utf-8 -*-
"""
Interpolation - Tabular interpolation, zero and extremum finding.

Turns short tables of samples into continuous estimates: values between
rows, zero-crossings and extrema. Equally spaced tables are given by
their first and last x values and all their y values; the interior x
values are implicit.

Available interpolators:

- ``QuadraticWindow`` — second-difference interpolation over 3 rows,
  with closed-form extremum and iterative zero.
- ``QuarticWindow`` — fourth-difference interpolation over 5 rows,
  with iterative extremum and zero.
- ``select_for_x`` — picks the 3 rows of a larger table nearest a
  target and builds a ``QuadraticWindow`` on them.
- ``interpolate_midpoint`` — center value of a 4-row table.
- ``LagrangeInterpolator`` / ``lagrange_interpolator`` — unequally
  spaced rows, value and interpolating polynomial.
- ``LinearWindow`` / ``linear_interpolate`` — two-point interpolation
  into a larger table.

Base classes and helpers:

- ``Interpolator`` — ABC for all interpolators.
- ``EquallySpacedWindow`` — template for the fixed-arity windows
  (validation, x <-> n mapping, strict range checks).
- ``horner`` — polynomial evaluation, constant term first.

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

from astrointerp.interpolation.base import (
    Interpolator,
    EquallySpacedWindow,
    horner,
)
from astrointerp.interpolation.quadratic import QuadraticWindow, select_for_x
from astrointerp.interpolation.quartic import (
    QuarticWindow,
    interpolate_midpoint,
)
from astrointerp.interpolation.lagrange import (
    LagrangeInterpolator,
    lagrange_interpolator,
)
from astrointerp.interpolation.linear import LinearWindow, linear_interpolate

__all__ = [
    'Interpolator',
    'EquallySpacedWindow',
    'horner',
    'QuadraticWindow',
    'select_for_x',
    'QuarticWindow',
    'interpolate_midpoint',
    'LagrangeInterpolator',
    'lagrange_interpolator',
    'LinearWindow',
    'linear_interpolate',
]
