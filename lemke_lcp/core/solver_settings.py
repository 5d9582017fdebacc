from pydantic import BaseModel, Field, field_validator


class SolverSettings(BaseModel):
    """
    Settings for the Lemke solver.

    Attributes:
        pivot_tol (float): Absolute tolerance below which a pivot element is
            refused, and at or below which a column entry is not eligible in
            the ratio test.
        max_iter (int): Iteration budget used when the caller passes none.
        feasibility_tol (float): Tolerance used when verifying a returned
            solution (nonnegativity, residual, complementarity).
    """
    pivot_tol: float = Field(
        default=1e-16,
        description="Absolute tolerance for pivot elements and ratio test eligibility"
    )
    max_iter: int = Field(
        default=1000,
        description="Default maximum number of complementary pivot iterations"
    )
    feasibility_tol: float = Field(
        default=1e-9,
        description="Tolerance used to verify feasibility and complementarity"
    )

    @field_validator('pivot_tol', 'feasibility_tol')
    def validate_tolerances(cls, v):
        """Validate that tolerances are positive."""
        if v <= 0:
            raise ValueError("tolerances must be positive")
        return v

    @field_validator('max_iter')
    def validate_max_iter(cls, v):
        """Validate that max_iter is non-negative."""
        if v < 0:
            raise ValueError("max_iter must be non-negative")
        return v
