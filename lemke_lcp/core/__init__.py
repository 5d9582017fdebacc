# lemke_lcp/core/__init__.py

# Import from lemke.py
from .lemke import LemkeSolver, LCPResult, LCPStatus, solve_lcp

# Import from tableau.py and basis.py
from .tableau import Tableau, pivot
from .basis import Basis, BasisVariable, VarKind

from .exceptions import LCPError, DegeneratePivotError, SecondaryRayError
from .solver_settings import SolverSettings

# Define what should be available when someone imports from lemke_lcp.core
__all__ = [
    # Main classes
    'LemkeSolver',
    'LCPResult',
    'LCPStatus',
    'solve_lcp',
    'SolverSettings',
    # Pivot engine
    'Tableau',
    'pivot',
    'Basis',
    'BasisVariable',
    'VarKind',
    # Errors
    'LCPError',
    'DegeneratePivotError',
    'SecondaryRayError',
]
