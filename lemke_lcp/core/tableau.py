"""
Dense tableau for Lemke's method.

The tableau of a problem of size n has n rows and 2n + 2 columns::

    [ I | -M | -1 | q ]
      z    x    x0  rhs

Row i reads ``z_i - sum_j M_ij x_j - x0 = q_i`` before any pivot.
"""

import numpy as np
from typing import Optional

from .basis import BasisVariable
from .exceptions import DegeneratePivotError

DEFAULT_PIVOT_TOL = 1e-16


def pivot(table: np.ndarray, pivot_row: int, pivot_col: int,
          eps: float = DEFAULT_PIVOT_TOL) -> None:
    """
    Gauss-Jordan pivot on ``table[pivot_row, pivot_col]``, in place.

    The pivot row is divided by the pivot element, then the pivot column is
    eliminated from every other row so that it becomes a unit vector.

    Raises:
        IndexError: if the pivot cell lies outside the table
        DegeneratePivotError: if ``|table[pivot_row, pivot_col]| < eps``;
            the table is left unchanged
    """
    rows, cols = table.shape
    if not (0 <= pivot_row < rows and 0 <= pivot_col < cols):
        raise IndexError(
            f"Pivot cell ({pivot_row}, {pivot_col}) outside table of shape {table.shape}"
        )
    pivot_val = table[pivot_row, pivot_col]
    if not abs(pivot_val) >= eps:
        raise DegeneratePivotError(pivot_row, pivot_col, float(pivot_val), eps)

    table[pivot_row, :] = table[pivot_row, :] / pivot_val
    for r in range(rows):
        if r == pivot_row:
            continue
        factor = table[r, pivot_col]
        if factor != 0.0:
            table[r, :] -= factor * table[pivot_row, :]


class Tableau:
    """Extended linear system of an LCP in reduced form."""

    def __init__(self, table: np.ndarray, eps: float = DEFAULT_PIVOT_TOL):
        rows, cols = table.shape
        if cols != 2 * rows + 2:
            raise ValueError(f"Tableau must have 2n + 2 columns, got shape {table.shape}")
        self.table = table
        self.n = rows
        self.eps = eps

    @classmethod
    def build(cls, M: np.ndarray, q: np.ndarray, eps: float = DEFAULT_PIVOT_TOL) -> "Tableau":
        """Build the initial tableau ``[I | -M | -1 | q]``."""
        n = q.shape[0]
        table = np.zeros((n, 2 * n + 2), dtype=float)
        table[:, 0:n] = np.eye(n)
        table[:, n:2 * n] = -M
        table[:, 2 * n] = -1.0
        table[:, 2 * n + 1] = q
        return cls(table, eps)

    @property
    def artificial_col(self) -> int:
        return 2 * self.n

    @property
    def rhs(self) -> np.ndarray:
        """Current value of the basic variable of each row (a view)."""
        return self.table[:, 2 * self.n + 1]

    def column_of(self, variable: BasisVariable) -> int:
        return variable.column(self.n)

    def pivot(self, row: int, col: int) -> None:
        pivot(self.table, row, col, self.eps)

    def ratio_test(self, col: int) -> Optional[int]:
        """
        Choose the leaving row for entering column ``col``.

        Rows with ``table[i, col] > eps`` are eligible; the one minimizing
        ``rhs[i] / table[i, col]`` wins. A later row replaces the current
        choice only with a strictly smaller ratio, so the first minimum found
        is kept on ties.

        Returns:
            The leaving row, or None when no row is eligible.
        """
        best_row = None
        best_ratio = None
        rhs = self.rhs
        for i in range(self.n):
            a = self.table[i, col]
            if a > self.eps:
                ratio = rhs[i] / a
                if best_ratio is None or ratio < best_ratio:
                    best_ratio = ratio
                    best_row = i
        return best_row
