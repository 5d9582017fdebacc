"""
Lemke's complementary pivoting algorithm.

Solves the LCP: find x >= 0, z = M*x + q >= 0, x^T*z = 0.

An artificial variable x0 enters the basis in place of the most negative
z[r]. From then on the entering variable is always the complement of the
variable that just left, and the ratio test picks the leaving row. The solve
succeeds when x0 itself leaves the basis.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from scipy.sparse import issparse

from .analysis import verify_solution
from .basis import Basis, BasisVariable
from .exceptions import DegeneratePivotError, SecondaryRayError
from .solver_settings import SolverSettings
from .tableau import Tableau


class LCPStatus(Enum):
    """Terminal state of a solve."""
    SUCCESS = "success"
    DEGENERATE_PIVOT = "degenerate_pivot"
    SECONDARY_RAY = "secondary_ray"
    ITERATION_LIMIT = "iteration_limit"

    @property
    def return_code(self) -> int:
        """0 for success or an exhausted budget, 1 for a pivot or ray failure."""
        if self in (LCPStatus.SUCCESS, LCPStatus.ITERATION_LIMIT):
            return 0
        return 1


@dataclass
class LCPResult:
    """
    Outcome of a solve.

    Attributes:
        status: Terminal state reached
        num_iter: Complementary pivot iterations completed without terminating
            the solve (equals max_iter exactly when the budget ran out)
        x: (n,) solution vector
        z: (n,) slack vector, z = M*x + q at a solution
        error: x^T*q + x^T*M*x, close to zero at a complementary solution
        info: Solver diagnostics
    """
    status: LCPStatus
    num_iter: int
    x: np.ndarray
    z: np.ndarray
    error: float
    info: Dict[str, Any] = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        return self.status is LCPStatus.SUCCESS

    @property
    def return_code(self) -> int:
        return self.status.return_code

    def as_tuple(self) -> Tuple[LCPStatus, int, np.ndarray, np.ndarray, float]:
        return self.status, self.num_iter, self.x, self.z, self.error


def _as_problem(M, q) -> Tuple[np.ndarray, np.ndarray]:
    """Normalize and validate M and q.

    Both are copied so caller output buffers may alias them.
    """
    q = np.array(q, dtype=float).reshape(-1)
    if issparse(M):
        M = M.toarray()
    M = np.array(M, dtype=float)

    n = q.shape[0]
    if n < 1:
        raise ValueError("LCP must have at least one variable.")
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ValueError(f"M must be a square matrix, got shape {M.shape}.")
    if M.shape[0] != n:
        raise ValueError(f"q must have the same dimension as M: {n} != {M.shape[0]}.")
    if not (np.all(np.isfinite(M)) and np.all(np.isfinite(q))):
        raise ValueError("M and q must contain only finite values.")
    return M, q


def _check_buffer(buf: Optional[np.ndarray], n: int, name: str) -> None:
    if buf is None:
        return
    if not isinstance(buf, np.ndarray) or buf.shape != (n,):
        raise ValueError(f"{name} must be a numpy array of shape ({n},).")
    if not np.issubdtype(buf.dtype, np.floating):
        raise ValueError(f"{name} must have a floating point dtype, got {buf.dtype}.")


def complementarity_error(M: np.ndarray, q: np.ndarray, x: np.ndarray) -> float:
    """Return x^T*q + x^T*M*x."""
    return float(x @ q + x @ (M @ x))


class LemkeSolver:
    """
    Linear Complementarity Problem solver using Lemke's method.

    Failures of the pivot engine are reported through ``LCPResult.status``;
    only malformed input raises.
    """

    def __init__(self, settings: Optional[SolverSettings] = None):
        """
        Initialize the solver.

        Args:
            settings: Solver settings (default: SolverSettings())
        """
        self.settings = settings if settings is not None else SolverSettings()
        self.logger = logging.getLogger(__name__)

    def solve(self, M: Union[np.ndarray, Any], q: np.ndarray, max_iter: Optional[int] = None,
              x: Optional[np.ndarray] = None, z: Optional[np.ndarray] = None) -> LCPResult:
        """
        Solve the Linear Complementarity Problem.

        Args:
            M: (n,n) LCP matrix (dense array, nested list or scipy sparse)
            q: (n,) LCP vector
            max_iter: Iteration budget (default: settings.max_iter)
            x: Optional (n,) float buffer for the solution, overwritten in place
            z: Optional (n,) float buffer for the slack, overwritten in place

        Returns:
            LCPResult
        """
        M, q = _as_problem(M, q)
        n = q.shape[0]
        if max_iter is None:
            max_iter = self.settings.max_iter
        if max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {max_iter}.")
        _check_buffer(x, n, "x")
        _check_buffer(z, n, "z")
        if x is not None and z is not None and np.shares_memory(x, z):
            raise ValueError("x and z must not share memory.")

        self.logger.debug(f"Starting Lemke solver: n={n}, max_iter={max_iter}")

        # Trivial solution x = 0, z = q
        if np.all(q >= 0.0):
            if x is None:
                x = np.zeros(n, dtype=float)
            if z is None:
                z = np.zeros(n, dtype=float)
            x.fill(0.0)
            z[:] = q
            self.logger.debug("q >= 0, returning trivial solution")
            return LCPResult(LCPStatus.SUCCESS, 0, x, z, 0.0, {
                "termination_reason": "trivial_solution",
                "pivots": 0,
                "complementarity": 0.0,
                "residual": 0.0,
                "basis": [f"z{k}" for k in range(n)],
                "complementary_basis": True,
                "artificial_basic": False,
                "feasible": True,
            })

        tableau = Tableau.build(M, q, self.settings.pivot_tol)
        basis = Basis(n)
        status, num_iter, pivots = self._run(tableau, basis, max_iter)

        x, z = basis.scatter(tableau.rhs, x, z)
        error = complementarity_error(M, q, x)
        info = {
            "termination_reason": status.value,
            "pivots": pivots,
            "complementarity": float(x @ z),
            "residual": float(np.max(np.abs(z - (M @ x + q)))),
            "basis": basis.labels(),
            "complementary_basis": basis.is_complementary(),
            "artificial_basic": basis.contains_artificial,
            "feasible": verify_solution(M, q, x, z, self.settings.feasibility_tol)["feasible"],
        }

        if status is LCPStatus.SUCCESS:
            self.logger.debug(f"Lemke converged in {num_iter} iterations ({pivots} pivots)")
            self.logger.debug(f"Error: {error:.2e}")
        else:
            self.logger.warning(
                f"Lemke terminated with {status.value} after {num_iter} iterations, error={error:.2e}"
            )

        return LCPResult(status, num_iter, x, z, error, info)

    def _run(self, tableau: Tableau, basis: Basis, max_iter: int) -> Tuple[LCPStatus, int, int]:
        """
        Drive the complementary pivoting loop on a fresh tableau.

        Returns:
            Tuple (status, num_iter, pivots)
        """
        q = tableau.rhs.copy()
        pivots = 0
        num_iter = 0

        # Most negative q, first occurrence on ties
        r = int(np.argmin(q))
        leaving = basis.replace(r, BasisVariable.artificial())
        try:
            tableau.pivot(r, tableau.artificial_col)
        except DegeneratePivotError as e:
            basis.replace(r, leaving)
            self.logger.warning(f"Initial pivot failed: {e}")
            return LCPStatus.DEGENERATE_PIVOT, num_iter, pivots
        pivots += 1
        entering = leaving.complement()
        self.logger.debug(f"Initial pivot: x0* enters at row {r}, {leaving} leaves")

        for step in range(max_iter):
            col = tableau.column_of(entering)
            try:
                row = tableau.ratio_test(col)
                if row is None:
                    raise SecondaryRayError(col)
                tableau.pivot(row, col)
            except SecondaryRayError as e:
                self.logger.warning(f"Iteration {step}: {e} ({entering} entering)")
                return LCPStatus.SECONDARY_RAY, num_iter, pivots
            except DegeneratePivotError as e:
                self.logger.warning(f"Iteration {step}: {e}")
                return LCPStatus.DEGENERATE_PIVOT, num_iter, pivots
            pivots += 1

            leaving = basis.replace(row, entering)
            self.logger.debug(f"Iteration {step}: {entering} enters at row {row}, {leaving} leaves")
            if leaving.is_artificial:
                return LCPStatus.SUCCESS, num_iter, pivots

            entering = leaving.complement()
            num_iter += 1

        return LCPStatus.ITERATION_LIMIT, num_iter, pivots


def solve_lcp(n: int, M, q, max_iter: int, x: Optional[np.ndarray] = None,
              z: Optional[np.ndarray] = None,
              settings: Optional[SolverSettings] = None) -> Tuple[LCPStatus, int, np.ndarray, np.ndarray, float]:
    """
    Solve z = M*x + q, x >= 0, z >= 0, x^T*z = 0 with Lemke's method.

    Args:
        n: Problem size
        M: (n,n) LCP matrix
        q: (n,) LCP vector
        max_iter: Iteration budget
        x: Optional (n,) float buffer, fully overwritten
        z: Optional (n,) float buffer, fully overwritten
        settings: Solver settings

    Returns:
        Tuple (status, num_iter, x, z, error). ``status.return_code`` gives
        0 for success or an exhausted budget and 1 for a failed solve.
    """
    q = np.asarray(q, dtype=float).reshape(-1)
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}.")
    if q.shape[0] != n:
        raise ValueError(f"q must have length {n}, got {q.shape[0]}.")
    return LemkeSolver(settings).solve(M, q, max_iter, x=x, z=z).as_tuple()
