"""Face descriptor value type."""
from typing import List, Sequence, Union

import numpy as np

from facematch.core.exceptions import DimensionMismatchError, InvalidDescriptorError


class Descriptor:
    """Fixed-length face embedding.

    The values are copied on construction into a read-only float64 array, so a
    descriptor never changes after it is created, whoever else holds the input.

    Example:
        ```python
        a = Descriptor([0.1, 0.2, 0.3])
        b = Descriptor(np.zeros(3))
        assert a.dimension == b.dimension == 3
        ```
    """

    __slots__ = ("_values",)

    def __init__(self, values: Union[Sequence[float], np.ndarray]) -> None:
        try:
            arr = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidDescriptorError(f"Descriptor values must be numeric: {e}")

        if arr.ndim != 1:
            raise InvalidDescriptorError(
                f"Descriptor must be one-dimensional, got shape {arr.shape}",
                details={"shape": arr.shape},
            )
        if arr.size == 0:
            raise InvalidDescriptorError("Descriptor must not be empty")
        if not np.all(np.isfinite(arr)):
            raise InvalidDescriptorError("Descriptor contains NaN or infinite values")

        arr.setflags(write=False)
        self._values = arr

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the descriptor values."""
        return self._values

    @property
    def dimension(self) -> int:
        return int(self._values.shape[0])

    def tolist(self) -> List[float]:
        return self._values.tolist()

    def __len__(self) -> int:
        return self.dimension

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Descriptor):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so equal descriptors hash alike
        return hash((self._values + 0.0).tobytes())

    def __repr__(self) -> str:
        head = ", ".join(f"{v:.4f}" for v in self._values[:3])
        tail = ", ..." if self.dimension > 3 else ""
        return f"Descriptor(dim={self.dimension}, [{head}{tail}])"


DescriptorLike = Union[Descriptor, Sequence[float], np.ndarray]


def as_descriptor(value: DescriptorLike) -> Descriptor:
    """Return `value` as a Descriptor, reusing it if it already is one."""
    if isinstance(value, Descriptor):
        return value
    return Descriptor(value)


def ensure_same_dimension(a: Descriptor, b: Descriptor) -> None:
    """Raise DimensionMismatchError unless both descriptors have the same length."""
    if a.dimension != b.dimension:
        raise DimensionMismatchError(expected=a.dimension, actual=b.dimension)
