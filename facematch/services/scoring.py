"""Distance and similarity scoring between face descriptors."""
import numpy as np

from facematch.domain.entities.descriptor import DescriptorLike, as_descriptor, ensure_same_dimension


def distance(a: DescriptorLike, b: DescriptorLike) -> float:
    """Euclidean distance between two descriptors of equal length.

    Symmetric bit-for-bit and zero only when the descriptors are equal
    element-wise.

    Raises:
        DimensionMismatchError: If the descriptors have different lengths
        InvalidDescriptorError: If either value is not a valid descriptor
    """
    da = as_descriptor(a)
    db = as_descriptor(b)
    ensure_same_dimension(da, db)

    diff = da.values - db.values
    scale = float(np.max(np.abs(diff)))
    if scale == 0.0:
        return 0.0
    # Scaled so tiny or huge components cannot underflow or overflow when squared.
    scaled = diff / scale
    return scale * float(np.sqrt(np.dot(scaled, scaled)))


def similarity_percent(dist: float) -> float:
    """Human-facing similarity for a distance: ``max(0, 100 * (1 - dist))``.

    Clamped at 0 only; a distance of 0 gives exactly 100.
    """
    return max(0.0, 100.0 * (1.0 - float(dist)))
