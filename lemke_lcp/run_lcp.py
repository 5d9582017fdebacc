# Run a Linear Complementarity Problem given as a JSON-like dict
import numpy as np
import logging

from lemke_lcp.core.lemke import LemkeSolver, LCPResult
from lemke_lcp.core.solver_settings import SolverSettings


def run_lcp(problem_json, settings=None) -> LCPResult:
    """
    Solve an LCP given as a JSON-like dict.

    Args:
        problem_json: Dict with "M" (list of rows), "q" (list) and optionally "max_iter"
        settings: Optional SolverSettings

    Returns:
        LCPResult
    """
    if "M" not in problem_json or "q" not in problem_json:
        raise ValueError("Problem must define both 'M' and 'q'")

    M = np.array(problem_json["M"], dtype=float)
    q = np.array(problem_json["q"], dtype=float)
    max_iter = problem_json.get("max_iter")

    solver = LemkeSolver(settings if settings is not None else SolverSettings())
    result = solver.solve(M, q, max_iter)

    logging.info("Status: %s after %s iterations", result.status.value, result.num_iter)
    logging.info("x = %s", result.x)
    logging.info("z = %s", result.z)
    logging.info("Error: %.3e", result.error)
    return result
