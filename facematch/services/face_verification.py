"""Face lock: verify live probes against a captured reference."""
from typing import Optional

from facematch.core.config import settings
from facematch.core.exceptions import NoReferenceError
from facematch.core.logging import get_logger
from facematch.domain.entities.descriptor import Descriptor, DescriptorLike, as_descriptor
from facematch.domain.value_objects.matching import VerificationResult
from facematch.services.verification import verify

logger = get_logger(__name__)


class FaceVerificationService:
    """Holds one reference descriptor and verifies probes against it."""

    def __init__(self, threshold: Optional[float] = None) -> None:
        self.threshold = settings.VERIFICATION_THRESHOLD if threshold is None else threshold
        self._reference: Optional[Descriptor] = None

    @property
    def reference(self) -> Optional[Descriptor]:
        return self._reference

    @property
    def has_reference(self) -> bool:
        return self._reference is not None

    def set_reference(self, descriptor: DescriptorLike) -> None:
        """Capture the reference face, replacing any previous one."""
        self._reference = as_descriptor(descriptor)
        logger.info("Reference descriptor captured", dimension=self._reference.dimension)

    def verify_probe(self, probe: DescriptorLike) -> VerificationResult:
        """
        Verify a probe against the captured reference.

        Raises:
            NoReferenceError: If no reference has been captured yet
            DimensionMismatchError: If the probe length differs from the reference
        """
        if self._reference is None:
            raise NoReferenceError("No reference descriptor captured")

        result = verify(self._reference, probe, self.threshold)
        logger.debug(
            "Verified probe",
            is_match=result.is_match,
            distance=result.distance,
            threshold=self.threshold,
        )
        return result
