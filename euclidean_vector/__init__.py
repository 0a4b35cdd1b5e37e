"""euclidean-vector — fixed-dimension dense vector of float64 values.

Dimension-checked arithmetic, checked and unchecked element access, and a
cached Euclidean norm.

Public API::

    from euclidean_vector import EuclideanVector, euclidean_norm, unit, dot
"""

from .errors import (
    DegenerateVectorError,
    DimensionError,
    DimensionMismatchError,
    DivisionByZeroError,
    EuclideanVectorError,
    VectorIndexError,
)
from .utility import dot, euclidean_norm, unit
from .vector import EuclideanVector

__version__ = "0.1.0"
__all__ = [
    "EuclideanVector",
    "euclidean_norm",
    "unit",
    "dot",
    "EuclideanVectorError",
    "VectorIndexError",
    "DimensionMismatchError",
    "DivisionByZeroError",
    "DimensionError",
    "DegenerateVectorError",
]
