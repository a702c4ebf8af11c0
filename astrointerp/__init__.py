# -*- coding: utf-8 -*-
"""
AstroInterp - Interpolation primitives for astronomical tables.

Converts short tables of tabulated values (ephemerides, Delta T,
distances, declinations) into precise answers at arbitrary arguments:
interpolated values, times of zero-crossing and times of extrema,
following Meeus, Astronomical Algorithms, ch. 3 and 5.

Dependencies
------------
numpy

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from astrointerp.exceptions import (
    AstroInterpError,
    ValidationError,
    OutOfRangeError,
    NoExtremumError,
    OutsideTableError,
    ExtremumOutsideTableError,
    ZeroOutsideTableError,
    ConvergenceError,
)
from astrointerp.vocabulary import ErrorKind, ZeroStrategy
from astrointerp.iteration import (
    MAX_ITERATIONS,
    RELATIVE_TOLERANCE,
    FixedPointIterator,
)

__all__ = [
    'AstroInterpError',
    'ValidationError',
    'OutOfRangeError',
    'NoExtremumError',
    'OutsideTableError',
    'ExtremumOutsideTableError',
    'ZeroOutsideTableError',
    'ConvergenceError',
    'ErrorKind',
    'ZeroStrategy',
    'MAX_ITERATIONS',
    'RELATIVE_TOLERANCE',
    'FixedPointIterator',
]
