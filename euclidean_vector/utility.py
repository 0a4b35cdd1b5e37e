"""Utility functions over EuclideanVector.

euclidean_norm — sqrt of the sum of squares, cached on the vector
unit           — the vector scaled to norm 1
dot            — sum of index-wise products of two equal-dimension vectors

None of these change a vector's entries.  ``euclidean_norm`` does write the
receiver's norm cache, see the thread-safety note in ``vector``.
"""

from __future__ import annotations

import logging

import numpy as np

from .errors import DegenerateVectorError, DimensionError, DimensionMismatchError
from .vector import EuclideanVector

logger = logging.getLogger(__name__)


def euclidean_norm(v: EuclideanVector) -> float:
    """Euclidean (L2) norm of ``v``; 0.0 for a 0-dimension vector.

    The result is stored on ``v`` and returned directly by later calls
    until an entry of ``v`` is modified.
    """
    if v._cached_norm is not None:
        return v._cached_norm
    norm = float(np.linalg.norm(v._magnitude))
    v._cached_norm = norm
    logger.debug("norm recomputed for %d-dimension vector: %r", v.dimensions(), norm)
    return norm


def unit(v: EuclideanVector) -> EuclideanVector:
    """Return a new vector pointing like ``v`` with norm 1.

    Raises
    ------
    DimensionError        : ``v`` has no dimensions.
    DegenerateVectorError : ``v`` has zero norm.
    """
    if v.dimensions() == 0:
        raise DimensionError()
    norm = euclidean_norm(v)
    if norm == 0:
        raise DegenerateVectorError()
    return v / norm


def dot(x: EuclideanVector, y: EuclideanVector) -> float:
    """Dot product of two vectors of the same dimension."""
    if x.dimensions() != y.dimensions():
        raise DimensionMismatchError(x.dimensions(), y.dimensions())
    # Dot product of two 0-dimension vectors is 0
    if x.dimensions() == 0:
        return 0.0
    return float(np.dot(x._magnitude, y._magnitude))
