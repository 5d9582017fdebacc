"""
Solution verification and matrix-class checks for LCPs.

Lemke's method is guaranteed to either find a solution or prove there is none
when M is monotone (M + M^T positive semidefinite). A P-matrix M has exactly
one solution for every q.
"""

import itertools
from typing import Dict, List, Tuple

import numpy as np
import sympy as sp
from scipy.linalg import eigvalsh


def verify_solution(M: np.ndarray, q: np.ndarray, x: np.ndarray, z: np.ndarray,
                    tol: float = 1e-9) -> Dict:
    """
    Verify that (x, z) solves the LCP given by M and q.

    Args:
        M: LCP matrix
        q: LCP vector
        x: Candidate solution
        z: Candidate slack
        tol: Tolerance for nonnegativity, residual and complementarity

    Returns:
        Dict with verification results
    """
    M = np.asarray(M, dtype=float)
    q = np.asarray(q, dtype=float).ravel()
    x = np.asarray(x, dtype=float).ravel()
    z = np.asarray(z, dtype=float).ravel()

    x_feasible = bool(np.all(x >= -tol))
    z_feasible = bool(np.all(z >= -tol))
    residual = float(np.max(np.abs(z - (M @ x + q))))
    complementarity = float(np.max(np.abs(np.minimum(x, z))))

    return {
        "x_feasible": x_feasible,
        "z_feasible": z_feasible,
        "residual": residual,
        "complementarity": complementarity,
        "feasible": x_feasible and z_feasible and residual < tol and complementarity < tol,
    }


def principal_minors(M: np.ndarray, exact: bool = False) -> List[Tuple[Tuple[int, ...], float]]:
    """
    All 2^n - 1 principal minors of M.

    With ``exact=True`` each float entry is converted to the rational it
    represents and the determinant is computed with sympy, so the sign of a
    minor never depends on rounding.
    """
    M = np.asarray(M, dtype=float)
    n = M.shape[0]
    minors = []
    for size in range(1, n + 1):
        for indices in itertools.combinations(range(n), size):
            sub = M[np.ix_(indices, indices)]
            if exact:
                det = sp.Matrix([[sp.Rational(v) for v in row] for row in sub.tolist()]).det()
            else:
                det = float(np.linalg.det(sub))
            minors.append((indices, det))
    return minors


def is_p_matrix(M: np.ndarray, exact: bool = False, tol: float = 1e-10) -> bool:
    """
    Check if M is a P-matrix (all principal minors are positive).

    A P-matrix guarantees a unique solution for any q.
    """
    threshold = 0 if exact else tol
    return all(det > threshold for _, det in principal_minors(M, exact))


def is_p0_matrix(M: np.ndarray, exact: bool = False, tol: float = 1e-10) -> bool:
    """Check if all principal minors of M are non-negative."""
    threshold = 0 if exact else -tol
    return all(det >= threshold for _, det in principal_minors(M, exact))


def is_monotone(M: np.ndarray, tol: float = 1e-10) -> bool:
    """Check if M + M^T is positive semidefinite."""
    M = np.asarray(M, dtype=float)
    return bool(np.min(eigvalsh(M + M.T)) >= -tol)


def enumerate_solutions(M: np.ndarray, q: np.ndarray, tol: float = 1e-9) -> List[Tuple[np.ndarray, np.ndarray]]:
    """
    Find all complementary solutions by checking every index set.

    For each subset S of indices, x is solved from M_SS x_S = -q_S with
    x = 0 outside S. Singular subsystems are skipped. Only suitable for
    small n.

    Returns:
        List of (x, z) tuples, duplicates removed
    """
    M = np.asarray(M, dtype=float)
    q = np.asarray(q, dtype=float).ravel()
    n = q.shape[0]

    solutions = []
    for mask in range(2 ** n):
        active = [i for i in range(n) if mask & (1 << i)]
        x = np.zeros(n)
        if active:
            try:
                x[active] = np.linalg.solve(M[np.ix_(active, active)], -q[active])
            except np.linalg.LinAlgError:
                continue
        z = M @ x + q

        if verify_solution(M, q, x, z, tol)["feasible"]:
            # Clean up numerical noise
            x[np.abs(x) < tol] = 0.0
            z[np.abs(z) < tol] = 0.0
            if not any(np.allclose(x, x_prev, atol=1e-8) for x_prev, _ in solutions):
                solutions.append((x, z))
    return solutions


def check_solution_uniqueness(M: np.ndarray, q: np.ndarray, tol: float = 1e-9) -> Dict:
    """
    Check existence and uniqueness of the LCP solution.

    Returns:
        dict with keys:
            'is_p_matrix': bool - M is a P-matrix (unique solution guaranteed)
            'num_solutions': int - number of complementary solutions found
            'solutions': list of (x, z) tuples
            'is_unique': bool - True if exactly one solution exists
    """
    solutions = enumerate_solutions(M, q, tol)
    return {
        "is_p_matrix": is_p_matrix(M),
        "num_solutions": len(solutions),
        "solutions": solutions,
        "is_unique": len(solutions) == 1,
    }
