# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Numeric matrices
"""

import logging
import math
from typing import Any, List

import numpy as np

from .abstract_matrix import AbstractMatrix
from .exceptions import InvalidArgumentException, MatrixException
from .utils import EPS, is_integer, is_real

logger = logging.getLogger(__name__)


def is_finite_real(value: Any) -> bool:
    """
    Cell validator for numeric matrices: a real number, not NaN or inf,
    that fits in a float64 (equality and mixed arithmetic go through float).
    """
    if not is_real(value):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _check_finite(data: List[List[Any]], operation: str) -> List[List[Any]]:
    for i, row in enumerate(data):
        for j, value in enumerate(row):
            if not is_finite_real(value):
                raise InvalidArgumentException(
                    f"{operation} overflowed: element [{i}, {j}] is {value!r}"
                )
    return data


class Matrix(AbstractMatrix):
    """
    Dense matrix of finite real numbers.

    Every operation has a pure form returning a new matrix and a mutating
    ``m_`` form that stores the result in the receiver and returns it.
    """

    cell_validator = staticmethod(is_finite_real)
    __array_ufunc__ = None  # numpy scalars defer to Matrix operators

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """
        size x size matrix with ones on the diagonal
        """
        if not is_integer(size) or size < 1:
            raise InvalidArgumentException(
                f"Identity matrix size must be a positive integer, got {size!r}"
            )
        return cls([[1 if i == j else 0 for j in range(size)] for i in range(size)])

    def to_numpy(self) -> np.ndarray:
        return np.array(self._data, dtype=float)

    # ------------------------------------------------------------------
    # Argument checks
    @staticmethod
    def _require_matrix(other: Any) -> None:
        if not isinstance(other, Matrix):
            raise InvalidArgumentException(
                f"Expected a Matrix, got {type(other).__name__}"
            )

    def _require_same_shape(self, other: Any, operation: str) -> None:
        self._require_matrix(other)
        if self.shape != other.shape:
            raise MatrixException(
                f"Cannot {operation} a {self._rows} x {self._columns} and a "
                f"{other.rows} x {other.columns} matrix"
            )

    @staticmethod
    def _require_scalar(scalar: Any) -> None:
        if not is_finite_real(scalar):
            raise InvalidArgumentException(
                f"Scalar must be a finite real number, got {scalar!r}"
            )

    # ------------------------------------------------------------------
    # Addition and subtraction
    def _sum(self, other: "Matrix") -> List[List[Any]]:
        self._require_same_shape(other, "add")
        return _check_finite(
            [
                [a + b for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self._data, other._data)
            ],
            "Addition",
        )

    def _difference(self, other: "Matrix") -> List[List[Any]]:
        self._require_same_shape(other, "subtract")
        return _check_finite(
            [
                [a - b for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self._data, other._data)
            ],
            "Subtraction",
        )

    def add(self, other: "Matrix") -> "Matrix":
        return self._spawn(self._sum(other))

    def m_add(self, other: "Matrix") -> "Matrix":
        self._adopt(self._sum(other))
        return self

    def subtract(self, other: "Matrix") -> "Matrix":
        return self._spawn(self._difference(other))

    def m_subtract(self, other: "Matrix") -> "Matrix":
        self._adopt(self._difference(other))
        return self

    # ------------------------------------------------------------------
    # Multiplication
    def _product(self, other: "Matrix") -> List[List[Any]]:
        """
        Triple loop product, summed in index order so that results are
        reproducible for fixed inputs.
        """
        self._require_matrix(other)
        if self._columns != other.rows:
            raise MatrixException(
                f"Cannot multiply a {self._rows} x {self._columns} by a "
                f"{other.rows} x {other.columns} matrix: inner dimensions differ"
            )
        right = other._data
        result = []
        for i, row in enumerate(self._data):
            result_row = []
            for j in range(other.columns):
                acc = 0
                try:
                    for k in range(self._columns):
                        acc += row[k] * right[k][j]
                except OverflowError as exc:
                    # int partial sum beyond float range met a float term
                    raise InvalidArgumentException(
                        f"Multiplication overflowed at element [{i}, {j}]"
                    ) from exc
                result_row.append(acc)
            result.append(result_row)
        return _check_finite(result, "Multiplication")

    def multiply(self, other: "Matrix") -> "Matrix":
        return self._spawn(self._product(other))

    def m_multiply(self, other: "Matrix") -> "Matrix":
        """
        Mutating multiplication. The product is computed into new storage
        first since the receiver is read until the last element is known
        and the shape may change.
        """
        product = self._product(other)
        logger.debug("m_multiply(): %d x %d -> %d x %d",
                     self._rows, self._columns, len(product), len(product[0]))
        self._adopt(product)
        return self

    def _scaled(self, scalar: Any) -> List[List[Any]]:
        self._require_scalar(scalar)
        return _check_finite(
            [[value * scalar for value in row] for row in self._data],
            "Scalar multiplication",
        )

    def multiply_by_scalar(self, scalar: Any) -> "Matrix":
        return self._spawn(self._scaled(scalar))

    def m_multiply_by_scalar(self, scalar: Any) -> "Matrix":
        self._adopt(self._scaled(scalar))
        return self

    def change_sign(self) -> "Matrix":
        return self._spawn([[-value for value in row] for row in self._data])

    def m_change_sign(self) -> "Matrix":
        self._adopt([[-value for value in row] for row in self._data])
        return self

    # ------------------------------------------------------------------
    # Equality
    def is_equal(self, other: Any, eps: float = EPS) -> bool:
        """
        Element-wise comparison with tolerance.

        Two elements a and b are equal when
        ``|a - b| <= eps * max(1, |a|, |b|)``, i.e. *eps* acts as an
        absolute tolerance for small values and a relative one for large
        values. Matrices of different shapes are never equal.
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        a = self.to_numpy()
        b = other.to_numpy()
        scale = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
        return bool(np.all(np.abs(a - b) <= eps * scale))

    def is_equal_exactly(self, other: Any) -> bool:
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return self._data == other._data

    # ------------------------------------------------------------------
    # Operators
    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m_add(other)

    def __sub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __isub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m_subtract(other)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __imatmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.m_multiply(other)

    def __mul__(self, scalar: Any) -> "Matrix":
        if not is_real(scalar):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    def __rmul__(self, scalar: Any) -> "Matrix":
        return self.__mul__(scalar)

    def __imul__(self, scalar: Any) -> "Matrix":
        if not is_real(scalar):
            return NotImplemented
        return self.m_multiply_by_scalar(scalar)

    def __neg__(self) -> "Matrix":
        return self.change_sign()
