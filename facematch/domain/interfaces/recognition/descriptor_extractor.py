"""Descriptor extraction interface.

The embedding model lives outside this package. Hosts plug their model in by
implementing this interface; the engine only ever sees the descriptors.
"""
from abc import ABC, abstractmethod
from typing import List

from ...entities.descriptor import Descriptor


class DescriptorExtractor(ABC):
    """Interface for turning an image into face descriptors."""

    @abstractmethod
    async def extract(self, image_bytes: bytes) -> List[Descriptor]:
        """
        Detect faces in the image and compute one descriptor per face.

        Args:
            image_bytes: Raw image data

        Returns:
            Descriptors for every detected face, possibly empty.

        Raises:
            NoDescriptorFoundError: Implementations may raise this instead of
                returning an empty list when no face is found.
        """
        pass
