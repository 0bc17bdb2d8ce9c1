# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
mathobjects
===========

Exact rational numbers and dense numeric matrices.

Public API
~~~~~~~~~~
- Numbers
    - `Rational`
- Linear algebra
    - `AbstractMatrix`, `Matrix`
- Helpers
    - `gcd`, `is_close`, `EPS`
- Errors
    - `MathObjectsException` and its subclasses
      `InvalidArgumentException`, `OutOfBoundsException`,
      `DivisionByZeroException`, `MatrixException`,
      `UnsupportedOperationException`

Example
-------
>>> from mathobjects import Matrix, Rational
>>> str(Rational.from_string("1 1/2").add(Rational(0, 1, 3)))
'1 5/6'
>>> Matrix.identity(2).multiply(Matrix.fill(2, 2, 3)).to_list()
[[3, 3], [3, 3]]
"""

from importlib.metadata import version as _pkg_version

from .abstract_matrix import AbstractMatrix
from .exceptions import (
    DivisionByZeroException,
    InvalidArgumentException,
    MathObjectsException,
    MatrixException,
    OutOfBoundsException,
    UnsupportedOperationException,
)
from .matrix import Matrix
from .rational import Rational
from .utils import EPS, gcd, is_close

__all__ = [
    "Rational",
    "AbstractMatrix",
    "Matrix",
    "gcd",
    "is_close",
    "EPS",
    "MathObjectsException",
    "InvalidArgumentException",
    "OutOfBoundsException",
    "DivisionByZeroException",
    "MatrixException",
    "UnsupportedOperationException",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show mathobjects", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library code only logs; handlers are the application's business.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
