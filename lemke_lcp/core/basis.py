from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np


class VarKind(Enum):
    """Kind of a variable that can be basic in a tableau row."""
    Z = "z"
    X = "x"
    ARTIFICIAL = "artificial"


@dataclass(frozen=True)
class BasisVariable:
    """
    A problem variable, tagged by kind.

    ``index`` is the position k of ``z[k]`` or ``x[k]``; it is ignored for the
    artificial variable.
    """
    kind: VarKind
    index: int = 0

    @classmethod
    def z(cls, k: int) -> "BasisVariable":
        return cls(VarKind.Z, k)

    @classmethod
    def x(cls, k: int) -> "BasisVariable":
        return cls(VarKind.X, k)

    @classmethod
    def artificial(cls) -> "BasisVariable":
        return cls(VarKind.ARTIFICIAL, 0)

    @property
    def is_artificial(self) -> bool:
        return self.kind is VarKind.ARTIFICIAL

    def complement(self) -> Optional["BasisVariable"]:
        """Return x[k] for z[k] and z[k] for x[k]; the artificial has none."""
        if self.kind is VarKind.Z:
            return BasisVariable.x(self.index)
        if self.kind is VarKind.X:
            return BasisVariable.z(self.index)
        return None

    def column(self, n: int) -> int:
        """Tableau column of this variable for a problem of size n."""
        if self.kind is VarKind.Z:
            return self.index
        if self.kind is VarKind.X:
            return n + self.index
        return 2 * n

    @property
    def label(self) -> str:
        if self.is_artificial:
            return "x0*"
        return f"{self.kind.value}{self.index}"

    def __str__(self) -> str:
        return self.label


class Basis:
    """
    Row -> basic variable assignment of a tableau.

    Every row starts with ``z[row]`` basic. Each pivot overwrites the leaving
    row with the entering variable.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"Basis size must be at least 1, got {n}")
        self.n = n
        self._rows: List[BasisVariable] = [BasisVariable.z(k) for k in range(n)]

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, row: int) -> BasisVariable:
        return self._rows[row]

    def __iter__(self):
        return iter(self._rows)

    def replace(self, row: int, entering: BasisVariable) -> BasisVariable:
        """Make ``entering`` basic in ``row`` and return the variable that left."""
        leaving = self._rows[row]
        self._rows[row] = entering
        return leaving

    @property
    def contains_artificial(self) -> bool:
        return any(v.is_artificial for v in self._rows)

    def is_complementary(self) -> bool:
        """True when no index k has both z[k] and x[k] basic."""
        seen = set()
        for v in self._rows:
            if v.is_artificial:
                continue
            if v.index in seen:
                return False
            seen.add(v.index)
        return True

    def labels(self) -> List[str]:
        return [v.label for v in self._rows]

    def scatter(self, rhs: np.ndarray, x: Optional[np.ndarray] = None,
                z: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Write the basic variable values into x and z.

        Both vectors are zero-filled first, then row i writes ``rhs[i]`` into
        the slot of its basic variable. A row holding the artificial variable
        contributes nothing.

        Args:
            rhs: (n,) right-hand side column of the tableau
            x: Optional (n,) output buffer, overwritten in place
            z: Optional (n,) output buffer, overwritten in place

        Returns:
            Tuple (x, z)
        """
        if x is None:
            x = np.zeros(self.n, dtype=float)
        if z is None:
            z = np.zeros(self.n, dtype=float)
        x.fill(0.0)
        z.fill(0.0)
        for row, v in enumerate(self._rows):
            if v.kind is VarKind.X:
                x[v.index] = rhs[row]
            elif v.kind is VarKind.Z:
                z[v.index] = rhs[row]
        return x, z
