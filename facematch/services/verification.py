"""One-to-one face verification."""
from facematch.domain.entities.descriptor import DescriptorLike
from facematch.domain.value_objects.matching import VerificationResult
from facematch.services.scoring import distance, similarity_percent


def verify(reference: DescriptorLike, probe: DescriptorLike, threshold: float) -> VerificationResult:
    """Compare a probe against a single reference descriptor.

    Args:
        reference: Enrolled descriptor
        probe: Descriptor to check
        threshold: Maximum distance, exclusive. A distance equal to the
            threshold is not a match.

    Returns:
        VerificationResult with the verdict, distance and similarity score

    Raises:
        DimensionMismatchError: If the descriptors have different lengths
    """
    d = distance(reference, probe)
    return VerificationResult(
        is_match=d < threshold,
        distance=d,
        score=similarity_percent(d),
    )
