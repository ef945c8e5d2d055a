"""Grouping service for batches of uploaded images."""
import math
from typing import Any, Callable, List, Mapping, Optional, Tuple

from facematch.core.config import settings
from facematch.core.exceptions import NoDescriptorFoundError
from facematch.core.logging import get_logger
from facematch.domain.entities.cluster import Cluster
from facematch.domain.entities.descriptor import Descriptor
from facematch.domain.interfaces.recognition.descriptor_extractor import DescriptorExtractor
from facematch.services.clustering import group_all

logger = get_logger(__name__)

ProgressCallback = Callable[[int], None]


class FaceGroupingService:
    """Service for grouping the faces found in a batch of images.

    This service:
    1. Extracts descriptors from each image, one image at a time
    2. Reports progress as a whole percentage after each image
    3. Groups every descriptor found with `group_all`

    Example:
        ```python
        service = FaceGroupingService(extractor)
        clusters = await service.group_images({"a.jpg": a_bytes, "b.jpg": b_bytes})
        ```
    """

    def __init__(self, extractor: DescriptorExtractor) -> None:
        """Initialize the grouping service.

        Args:
            extractor: Embedding model adapter that returns descriptors for an image
        """
        self.extractor = extractor

    async def collect_descriptors(
        self,
        images: Mapping[Any, bytes],
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[Tuple[Any, Descriptor]]:
        """Extract (source id, descriptor) pairs from every image, in mapping order.

        Images without a face contribute nothing.
        """
        pairs: List[Tuple[Any, Descriptor]] = []
        total = len(images)
        for position, (source_id, image_bytes) in enumerate(images.items(), 1):
            try:
                descriptors = await self.extractor.extract(image_bytes)
            except NoDescriptorFoundError:
                descriptors = []

            if not descriptors:
                logger.info("No faces found in image", source_id=source_id)
            for descriptor in descriptors:
                pairs.append((source_id, descriptor))

            if on_progress is not None:
                on_progress(math.floor(position / total * 100 + 0.5))

        return pairs

    async def group_images(
        self,
        images: Mapping[Any, bytes],
        threshold: Optional[float] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[Cluster]:
        """Group all faces found across `images`.

        Args:
            images: Image bytes keyed by source id, in upload order
            threshold: Grouping threshold, defaults to GROUPING_THRESHOLD
            on_progress: Called with 0-100 after each image is processed

        Returns:
            Clusters in creation order

        Raises:
            DimensionMismatchError: If the extractor returns descriptors of different lengths
        """
        if threshold is None:
            threshold = settings.GROUPING_THRESHOLD

        pairs = await self.collect_descriptors(images, on_progress=on_progress)
        clusters = group_all(pairs, threshold)
        logger.info(
            "Grouped faces",
            images=len(images),
            faces=len(pairs),
            clusters=len(clusters),
        )
        return clusters
