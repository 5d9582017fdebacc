import numpy as np
import pytest
import sympy as sp

from lemke_lcp.core.analysis import (
    check_solution_uniqueness,
    enumerate_solutions,
    is_monotone,
    is_p0_matrix,
    is_p_matrix,
    principal_minors,
    verify_solution,
)
from lemke_lcp.core.lemke import LemkeSolver


def test_verify_solution_accepts_known_solution(synthetic_lcp_data):
    M, q, x, z = synthetic_lcp_data
    verification = verify_solution(M, q, x, z)

    assert verification['feasible']
    assert verification['x_feasible']
    assert verification['z_feasible']
    assert verification['residual'] == pytest.approx(0.0)
    assert verification['complementarity'] == pytest.approx(0.0)


def test_verify_solution_rejects_infeasible_point(symmetric_pd_lcp):
    """x = [0, 3] satisfies the second row but makes z[0] negative."""
    M, q = symmetric_pd_lcp
    x = np.array([0., 3.])
    z = M @ x + q
    verification = verify_solution(M, q, x, z)

    assert not verification['z_feasible']
    assert not verification['feasible']


def test_verify_solution_rejects_non_complementary(symmetric_pd_lcp):
    M, q = symmetric_pd_lcp
    x = np.array([5., 5.])
    z = M @ x + q
    verification = verify_solution(M, q, x, z)

    assert verification['x_feasible'] and verification['z_feasible']
    assert verification['complementarity'] > 1.0
    assert not verification['feasible']


def test_principal_minors():
    M = np.array([[2., 1.], [1., 2.]])
    minors = dict(principal_minors(M))

    assert set(minors) == {(0,), (1,), (0, 1)}
    assert minors[(0,)] == pytest.approx(2.0)
    assert minors[(0, 1)] == pytest.approx(3.0)


def test_principal_minors_exact():
    """Test that exact minors are sympy rationals of the float entries."""
    M = np.array([[0.1, 0.2], [0.3, 0.4]])
    minors = dict(principal_minors(M, exact=True))

    det = minors[(0, 1)]
    assert isinstance(det, sp.Rational)
    expected = sp.Rational(0.1) * sp.Rational(0.4) - sp.Rational(0.2) * sp.Rational(0.3)
    assert det == expected


def test_is_p_matrix(synthetic_lcp_data, symmetric_pd_lcp, skew_lcp):
    assert is_p_matrix(synthetic_lcp_data[0])
    assert is_p_matrix(symmetric_pd_lcp[0], exact=True)
    assert not is_p_matrix(skew_lcp[0])
    assert not is_p_matrix(np.array([[1., 2.], [2., 1.]]))


def test_is_p0_matrix(skew_lcp):
    # Principal minors of the skew matrix are 0, 0 and 1
    assert is_p0_matrix(skew_lcp[0])
    assert is_p0_matrix(skew_lcp[0], exact=True)
    assert not is_p0_matrix(np.array([[-1., 0.], [0., 1.]]))


def test_is_monotone(symmetric_pd_lcp, skew_lcp):
    assert is_monotone(symmetric_pd_lcp[0])
    # M + M^T = 0 for a skew-symmetric matrix
    assert is_monotone(skew_lcp[0])
    assert not is_monotone(np.array([[1., 3.], [3., 1.]]))


def test_enumerate_solutions_unique(symmetric_pd_lcp):
    M, q = symmetric_pd_lcp
    solutions = enumerate_solutions(M, q)

    assert len(solutions) == 1
    x, z = solutions[0]
    assert np.allclose(x, [4. / 3., 7. / 3.])
    assert np.allclose(z, 0.0)


def test_enumerate_solutions_multiple():
    """M = [[1, 2], [2, 1]] with q = [-1, -1] has three solutions."""
    M = np.array([[1., 2.], [2., 1.]])
    q = np.array([-1., -1.])
    solutions = enumerate_solutions(M, q)

    xs = sorted(tuple(np.round(x, 9)) for x, _ in solutions)
    assert len(xs) == 3
    assert np.allclose(xs[0], [0., 1.])
    assert np.allclose(xs[1], [1. / 3., 1. / 3.])
    assert np.allclose(xs[2], [1., 0.])

    # Lemke returns one of them
    result = LemkeSolver().solve(M, q)
    assert any(np.allclose(result.x, x) for x, _ in solutions)


def test_enumerate_solutions_none(skew_lcp):
    assert enumerate_solutions(*skew_lcp) == []


def test_check_solution_uniqueness(synthetic_lcp_data):
    M, q, x_expected, _ = synthetic_lcp_data
    result = check_solution_uniqueness(M, q)

    assert result['is_p_matrix']
    assert result['is_unique']
    assert result['num_solutions'] == 1
    assert np.allclose(result['solutions'][0][0], x_expected)
