# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Generic two-dimensional storage shared by all matrix types
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from .exceptions import (
    InvalidArgumentException,
    MatrixException,
    OutOfBoundsException,
    UnsupportedOperationException,
)
from .utils import is_integer

logger = logging.getLogger(__name__)

CellValidator = Callable[[Any], bool]


class AbstractMatrix:
    """
    Rectangular grid of cells stored as a list of rows.

    The shape is fixed once the matrix is built; only cell values change,
    through ``set`` or the mutating (``m_``) operations. Which cell values
    are acceptable is decided by a validator: subclasses provide one as the
    ``cell_validator`` class attribute and the ``validator`` argument
    overrides it for a single instance. Without any validator every value
    is accepted.

    ``len(m)`` is the number of cells (``size``) while iterating yields the
    rows, so ``len(list(m)) == m.rows`` rather than ``len(m)``.
    """

    cell_validator: Optional[CellValidator] = None

    def __init__(
        self,
        data: Sequence[Sequence[Any]],
        validator: Optional[CellValidator] = None,
    ) -> None:
        self._validator = validator if validator is not None else type(self).cell_validator
        self._adopt(self.validate_data(data))

    # ------------------------------------------------------------------
    # Construction helpers
    @classmethod
    def fill(
        cls,
        rows: int,
        columns: int,
        value: Any,
        validator: Optional[CellValidator] = None,
    ) -> "AbstractMatrix":
        """
        Create a rows x columns matrix with every element set to *value*.
        """
        if not is_integer(rows) or not is_integer(columns) or rows < 1 or columns < 1:
            raise InvalidArgumentException(
                f"Matrix dimensions must be positive integers, got {rows!r} x {columns!r}"
            )
        return cls([[value] * columns for _ in range(rows)], validator=validator)

    def validate_data(self, data: Sequence[Sequence[Any]]) -> List[List[Any]]:
        """
        Check that *data* is a non-empty list of rows of equal length and
        that every cell passes the class-specific validator.

        Returns
        -------
        list[list]
            A copy of *data* ready to be used as storage.
        """
        try:
            rows = [list(row) for row in data]
        except TypeError as exc:
            raise InvalidArgumentException(
                "Matrix data must be a sequence of rows"
            ) from exc

        if len(rows) == 0:
            raise InvalidArgumentException("Matrix must have at least one row")
        columns = len(rows[0])
        if columns == 0:
            raise InvalidArgumentException("Matrix must have at least one column")

        for i, row in enumerate(rows):
            if len(row) != columns:
                raise MatrixException(
                    f"Inconsistent row length: row {i} has {len(row)} elements, "
                    f"expected {columns}"
                )
            for j, value in enumerate(row):
                self._validate_cell(value, i, j)
        return rows

    def _validate_cell(self, value: Any, row: int, column: int) -> None:
        if self._validator is not None and not self._validator(value):
            raise InvalidArgumentException(
                f"Invalid matrix element {value!r} at [{row}, {column}]"
            )

    def _adopt(self, data: List[List[Any]]) -> None:
        # replaces storage and cached dimensions, data must already be valid
        self._data = data
        self._rows = len(data)
        self._columns = len(data[0])
        self._size = self._rows * self._columns

    def _spawn(self, data: List[List[Any]]) -> "AbstractMatrix":
        # new instance of the same type around already validated data
        matrix = type(self).__new__(type(self))
        matrix._validator = self._validator
        matrix._adopt(data)
        return matrix

    # ------------------------------------------------------------------
    # Shape
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def __len__(self) -> int:
        return self._size

    def to_list(self) -> List[List[Any]]:
        return [row[:] for row in self._data]

    def copy(self) -> "AbstractMatrix":
        return self._spawn(self.to_list())

    # ------------------------------------------------------------------
    # Element access
    def _check_indices(self, row: Any, column: Any) -> None:
        if not is_integer(row) or not is_integer(column):
            raise InvalidArgumentException(
                f"Matrix indices must be integers, got [{row!r}, {column!r}]"
            )
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise OutOfBoundsException(
                f"Index [{row}, {column}] is out of bounds for a "
                f"{self._rows} x {self._columns} matrix"
            )

    def is_set(self, row: Any, column: Any) -> bool:
        return (
            is_integer(row)
            and is_integer(column)
            and 0 <= row < self._rows
            and 0 <= column < self._columns
        )

    def get(self, row: int, column: int) -> Any:
        self._check_indices(row, column)
        return self._data[row][column]

    def set(self, row: int, column: int, value: Any) -> None:
        self._check_indices(row, column)
        self._validate_cell(value, row, column)
        self._data[row][column] = value

    @staticmethod
    def _unpack(key: Any) -> Tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidArgumentException(
                f"Matrix elements are addressed as [row, column], got {key!r}"
            )
        return key

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        return self.get(*self._unpack(key))

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        self.set(*self._unpack(key), value)

    def __delitem__(self, key: Tuple[int, int]) -> None:
        raise UnsupportedOperationException(
            "Matrix elements cannot be removed, the shape is fixed"
        )

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, tuple) and len(key) == 2 and self.is_set(*key)

    def __iter__(self) -> Iterator[List[Any]]:
        for row in self._data:
            yield row[:]

    # ------------------------------------------------------------------
    # Transpose
    def _transposed(self) -> List[List[Any]]:
        return [list(column) for column in zip(*self._data)]

    def transpose(self) -> "AbstractMatrix":
        return self._spawn(self._transposed())

    def m_transpose(self) -> "AbstractMatrix":
        """
        Transpose in place: the receiver adopts the transposed storage
        and its swapped dimensions.
        """
        logger.debug("m_transpose(): %d x %d -> %d x %d",
                     self._rows, self._columns, self._columns, self._rows)
        self._adopt(self._transposed())
        return self

    # ------------------------------------------------------------------
    # Representation
    def to_string(self) -> str:
        return "\n".join("\t".join(str(value) for value in row) for row in self._data)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
