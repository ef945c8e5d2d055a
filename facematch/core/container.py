"""Service container for dependency injection."""
from typing import Optional

from facematch.core.config import settings
from facematch.services.gallery import Gallery


class ServiceContainer:
    """Container for application services.

    Holds the per-process gallery. Its contents live only as long as the
    process; nothing is persisted.

    Example:
        ```python
        container = ServiceContainer()
        await container.initialize()
        gallery = container.gallery
        ```
    """

    def __init__(self) -> None:
        """Initialize empty container."""
        self.gallery: Optional[Gallery] = None

    async def initialize(self) -> None:
        """Initialize all services."""
        self.gallery = Gallery(
            dimension=settings.DESCRIPTOR_DIMENSION,
            aggregation=settings.GALLERY_AGGREGATION,
        )

    async def cleanup(self) -> None:
        """Drop the in-memory gallery."""
        self.gallery = None


# Global container instance
container = ServiceContainer()
