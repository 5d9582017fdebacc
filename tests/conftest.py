import numpy as np
import pytest


@pytest.fixture
def synthetic_lcp_data():
    """Provide synthetic LCP test data with a known solution."""
    M = np.array([[3., -1., 0.],
                  [2.,  4., 1.],
                  [1., -2., 2.]])
    q = np.array([-3., -3., -7.])
    # Known solution
    x = np.array([1., 0., 3.])
    z = M @ x + q
    return M, q, x, z


@pytest.fixture
def symmetric_pd_lcp():
    """Positive definite 2x2 problem, unique solution x = [4/3, 7/3]."""
    M = np.array([[2., 1.],
                  [1., 2.]])
    q = np.array([-5., -6.])
    return M, q


@pytest.fixture
def skew_lcp():
    """Skew-symmetric M with negative q: infeasible, ends on a secondary ray."""
    M = np.array([[0., -1.],
                  [1., 0.]])
    q = np.array([-1., -1.])
    return M, q
