import logging

import numpy as np
import pytest

from lemke_lcp.core.lemke import LCPStatus
from lemke_lcp.core.solver_settings import SolverSettings
from lemke_lcp.run_lcp import run_lcp


@pytest.fixture
def problem_json():
    return {
        "M": [[2.0, 1.0], [1.0, 2.0]],
        "q": [-5.0, -6.0],
    }


def test_run_lcp(problem_json):
    result = run_lcp(problem_json)

    assert result.status is LCPStatus.SUCCESS
    assert np.allclose(result.x, [4. / 3., 7. / 3.])


def test_run_lcp_max_iter(problem_json):
    problem_json["max_iter"] = 0
    result = run_lcp(problem_json)

    assert result.status is LCPStatus.ITERATION_LIMIT
    assert result.num_iter == 0


def test_run_lcp_settings(problem_json):
    result = run_lcp(problem_json, SolverSettings(max_iter=1))
    assert result.status is LCPStatus.ITERATION_LIMIT


def test_run_lcp_missing_keys():
    with pytest.raises(ValueError):
        run_lcp({"M": [[1.0]]})


def test_run_lcp_logs_result(problem_json, caplog):
    with caplog.at_level(logging.INFO):
        result = run_lcp(problem_json)

    assert result.converged
    assert "Status: success" in caplog.text
