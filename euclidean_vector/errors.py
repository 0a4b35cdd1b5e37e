"""Error taxonomy for euclidean_vector.

Every failure raised by the package derives from ``EuclideanVectorError``.
Each concrete kind also inherits the closest builtin exception so callers
catching ``IndexError`` / ``ValueError`` / ``ZeroDivisionError`` still see it.

VectorIndexError       — checked access outside [0, dimensions)
DimensionMismatchError — binary vector operation on differing dimensions
DivisionByZeroError    — scalar division by 0
DimensionError         — unit vector of a 0-dimension vector
DegenerateVectorError  — unit vector of a zero-norm vector
"""

from __future__ import annotations


class EuclideanVectorError(RuntimeError):
    """Base category for all euclidean_vector failures."""


class VectorIndexError(EuclideanVectorError, IndexError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Index {index} is not valid for this euclidean_vector object"
        )


class DimensionMismatchError(EuclideanVectorError, ValueError):
    def __init__(self, lhs: int, rhs: int) -> None:
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"Dimensions of LHS({lhs}) and RHS({rhs}) do not match")


class DivisionByZeroError(EuclideanVectorError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("Invalid vector division by 0")


class DimensionError(EuclideanVectorError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "euclidean_vector with no dimensions does not have a unit vector"
        )


class DegenerateVectorError(EuclideanVectorError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "euclidean_vector with zero euclidean normal does not have a unit vector"
        )
