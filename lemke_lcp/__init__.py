from .core import LemkeSolver, LCPResult, LCPStatus, SolverSettings, solve_lcp
from .core.analysis import verify_solution, check_solution_uniqueness, is_monotone, is_p_matrix
from .run_lcp import run_lcp

__version__ = "0.1.0"

# Export the main classes and functions that users will need
__all__ = [
    'LemkeSolver',
    'LCPResult',
    'LCPStatus',
    'SolverSettings',
    'solve_lcp',
    'verify_solution',
    'check_solution_uniqueness',
    'is_monotone',
    'is_p_matrix',
    'run_lcp'
]
