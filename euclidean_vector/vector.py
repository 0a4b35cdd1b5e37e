"""EuclideanVector — fixed-dimension dense vector of float64 values.

The entries live in an owned 1-D numpy buffer that is never shared between
two vectors.  The Euclidean norm is cached on the instance by
``euclidean_vector.utility.euclidean_norm`` and dropped by every operation
that may change an entry.

Thread safety
-------------
None.  ``euclidean_norm`` writes the cache through an otherwise read-only
call, so norm reads racing writes on the *same* instance must be
synchronised by the caller.  Distinct instances share no state.
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

import numpy as np

from .errors import DimensionMismatchError, DivisionByZeroError, VectorIndexError

logger = logging.getLogger(__name__)

_Ufunc = Callable[..., np.ndarray]


class EuclideanVector:
    """Dense vector with dimension-checked arithmetic.

    Schema
    ------
    _magnitude   : np.ndarray[float64], shape (dimensions,) — owned entries
    _cached_norm : Optional[float] — last computed norm, None when unset

    Parameters
    ----------
    dimensions : int
        Number of entries, >= 0.  Defaults to 1.
    magnitude : float
        Value every entry is initialised to.  Defaults to 0.0.

    Use ``from_iterable`` / ``from_list`` / ``of`` to build a vector from
    explicit values.
    """

    DTYPE = np.float64
    EPSILON: float = float(np.finfo(np.float64).eps)

    # numpy scalars must defer to our reflected operators instead of
    # treating the vector as a sequence.
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(self, dimensions: int = 1, magnitude: float = 0.0) -> None:
        dimensions = operator.index(dimensions)
        if dimensions < 0:
            raise ValueError(f"dimensions must be >= 0, got {dimensions}")
        self._magnitude: np.ndarray = np.full(
            dimensions, float(magnitude), dtype=self.DTYPE
        )
        self._cached_norm: Optional[float] = None

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> "EuclideanVector":
        """Wrap ``arr`` without copying; the caller gives up ownership."""
        ev = cls.__new__(cls)
        ev._magnitude = arr
        ev._cached_norm = None
        return ev

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "EuclideanVector":
        """Build a vector from every item of ``values``, in order."""
        return cls._from_array(np.fromiter(values, dtype=cls.DTYPE))

    @classmethod
    def from_list(cls, values: List[float]) -> "EuclideanVector":
        """Build a vector from a list literal.

        An empty list gives a 0-dimension vector, not the 1-dimension
        default.
        """
        arr = np.array(values, dtype=cls.DTYPE)
        if arr.ndim != 1:
            raise ValueError("Values must form a 1-D sequence.")
        return cls._from_array(arr)

    @classmethod
    def of(cls, *values: float) -> "EuclideanVector":
        """Factory: ``EuclideanVector.of(1, 2, 3)``."""
        return cls.from_list(list(values))

    # ------------------------------------------------------------------
    # Copy / move
    # ------------------------------------------------------------------

    def copy(self) -> "EuclideanVector":
        """Deep copy; a valid cached norm is carried over."""
        ev = self._from_array(self._magnitude.copy())
        ev._cached_norm = self._cached_norm
        return ev

    def __copy__(self) -> "EuclideanVector":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "EuclideanVector":
        return self.copy()

    def move(self) -> "EuclideanVector":
        """Transfer the buffer to a new vector and leave ``self`` empty."""
        ev = self._from_array(self._magnitude)
        ev._cached_norm = self._cached_norm
        self._reset()
        logger.debug("moved %d-dimension vector", ev.dimensions())
        return ev

    def assign(self, other: "EuclideanVector") -> "EuclideanVector":
        """Replace this vector's whole value with a copy of ``other``."""
        self._magnitude = other._magnitude.copy()
        self._cached_norm = other._cached_norm
        return self

    def move_assign(self, other: "EuclideanVector") -> "EuclideanVector":
        """Take ownership of ``other``'s buffer; ``other`` is left empty.

        Moving a vector into itself leaves it unchanged.
        """
        if other is self:
            return self
        self._magnitude = other._magnitude
        self._cached_norm = other._cached_norm
        other._reset()
        return self

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._magnitude = np.empty(0, dtype=self.DTYPE)
        self._cached_norm = None

    def _invalidate(self) -> None:
        self._cached_norm = None

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= self.dimensions():
            raise VectorIndexError(index)
        return index

    def _check_dimensions(self, other: "EuclideanVector") -> None:
        if self.dimensions() != other.dimensions():
            raise DimensionMismatchError(self.dimensions(), other.dimensions())

    def _merge(self, other: "EuclideanVector", func: _Ufunc) -> None:
        """Combine ``other`` into ``self`` entry by entry with ``func``."""
        self._check_dimensions(other)
        func(self._magnitude, other._magnitude, out=self._magnitude)
        self._invalidate()

    def _scale(self, factor: float, func: _Ufunc) -> None:
        """Apply ``func(entry, factor)`` to every entry in place."""
        func(self._magnitude, float(factor), out=self._magnitude)
        self._invalidate()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> float:
        # Unchecked: bounds are only asserted, ``python -O`` drops the check.
        index = operator.index(index)
        assert 0 <= index < self.dimensions(), f"index {index} out of range"
        return float(self._magnitude[index])

    def __setitem__(self, index: int, value: float) -> None:
        index = operator.index(index)
        assert 0 <= index < self.dimensions(), f"index {index} out of range"
        self._invalidate()
        self._magnitude[index] = value

    def at(self, index: int) -> float:
        """Checked read of entry ``index``."""
        return float(self._magnitude[self._check_index(index)])

    def set_at(self, index: int, value: float) -> float:
        """Checked write of entry ``index``; returns the stored value."""
        index = self._check_index(index)
        self._invalidate()
        self._magnitude[index] = value
        return float(self._magnitude[index])

    def dimensions(self) -> int:
        return int(self._magnitude.shape[0])

    def __len__(self) -> int:
        return self.dimensions()

    def __iter__(self) -> Iterator[float]:
        return iter(self._magnitude.tolist())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __pos__(self) -> "EuclideanVector":
        return self.copy()

    def __neg__(self) -> "EuclideanVector":
        # Negation preserves the norm, so the copied cache stays valid.
        ev = self.copy()
        np.negative(ev._magnitude, out=ev._magnitude)
        return ev

    def __iadd__(self, other: object) -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._merge(other, np.add)
        return self

    def __isub__(self, other: object) -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._merge(other, np.subtract)
        return self

    def __imul__(self, factor: object) -> "EuclideanVector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        self._scale(factor, np.multiply)
        return self

    def __itruediv__(self, factor: object) -> "EuclideanVector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        if factor == 0:
            raise DivisionByZeroError()
        self._scale(factor, np.true_divide)
        return self

    def __add__(self, other: object) -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        ev = self.copy()
        ev += other
        return ev

    def __sub__(self, other: object) -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        ev = self.copy()
        ev -= other
        return ev

    def __mul__(self, factor: object) -> "EuclideanVector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        ev = self.copy()
        ev *= factor
        return ev

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> "EuclideanVector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        ev = self.copy()
        ev /= factor
        return ev

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        if other is self:
            return True
        if self.dimensions() != other.dimensions():
            return False
        diff = np.abs(self._magnitude - other._magnitude)
        return bool(np.all(diff < self.EPSILON))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_list(self) -> List[float]:
        """Independent list of the entries in index order."""
        return self._magnitude.tolist()

    def to_array(self) -> np.ndarray:
        """Independent float64 numpy copy of the entries."""
        return self._magnitude.copy()

    def __str__(self) -> str:
        return "[" + " ".join(format(x, "g") for x in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"EuclideanVector({self.to_list()!r})"
