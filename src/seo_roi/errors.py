"""Error taxonomy shared by the validator and the calculation engine."""

from __future__ import annotations

from enum import StrEnum

__all__ = ["CALCULATION_ERROR_KEY", "CalculationError", "ErrorKind", "InvalidUpdateError"]

# Reserved key for calculation-level messages in an error mapping.
# Field names never start with an underscore, so it cannot collide.
CALCULATION_ERROR_KEY = "_calculation"


class ErrorKind(StrEnum):
    """Why a calculation did not produce a result."""

    VALIDATION = "validation"
    PRECISION_LIMIT = "precision_limit"
    DIVISION_BY_ZERO = "division_by_zero"
    BOUNDARY_MISMATCH = "boundary_mismatch"
    UNREALISTIC_ROI = "unrealistic_roi"
    UNREALISTIC_GROWTH = "unrealistic_growth"
    INCONSISTENT_BREAK_EVEN = "inconsistent_break_even"


class CalculationError(Exception):
    """Internal invariant violated while computing a projection.

    Raised inside the pipeline and converted by ``compute()`` into a
    typed failure; it never escapes to callers of the engine.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class InvalidUpdateError(ValueError):
    """An input update carried values that cannot form a valid snapshot.

    ``errors`` is field-keyed, in the same shape ``parse_input()`` returns.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(errors.values()))
        self.errors = errors
