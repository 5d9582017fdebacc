"""
Errors raised inside the pivot engine.

The driver in :mod:`lemke_lcp.core.lemke` catches these and reports them as
an :class:`~lemke_lcp.core.lemke.LCPStatus`, so they never leave a solve.
"""


class LCPError(Exception):
    """Base class for pivot engine failures."""


class DegeneratePivotError(LCPError):
    """Pivot element is too small in magnitude to divide by."""

    def __init__(self, row: int, col: int, value: float, eps: float):
        self.row = row
        self.col = col
        self.value = value
        self.eps = eps
        super().__init__(
            f"Degenerate pivot at ({row}, {col}): |{value:.3e}| < {eps:.1e}"
        )


class SecondaryRayError(LCPError):
    """No row is eligible to leave the basis for the entering column."""

    def __init__(self, col: int):
        self.col = col
        super().__init__(f"Secondary ray: no eligible leaving row for column {col}")
