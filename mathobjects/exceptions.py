# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by mathobjects.

Every class also derives from the closest builtin, so code catching
``ValueError`` or ``ZeroDivisionError`` keeps working.
"""


class MathObjectsException(Exception):
    """Base class for all errors raised by the library"""


class InvalidArgumentException(MathObjectsException, ValueError):
    """Malformed constructor or factory input"""


class OutOfBoundsException(MathObjectsException, IndexError):
    """Index outside the current matrix shape"""


class DivisionByZeroException(MathObjectsException, ZeroDivisionError):
    """Division of a rational number by zero"""


class MatrixException(MathObjectsException, ValueError):
    """Inconsistent matrix data or incompatible matrix shapes"""


class UnsupportedOperationException(MathObjectsException, NotImplementedError):
    """Operation the object deliberately does not support"""
