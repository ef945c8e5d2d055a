"""FastAPI dependency providers."""
from facematch.core.container import ServiceContainer, container
from facematch.services.gallery import Gallery


async def get_container() -> ServiceContainer:
    """Dependency provider for the global ServiceContainer instance."""
    if container.gallery is None:
        # Lifespan did not run (e.g. a bare TestClient); initialize lazily.
        await container.initialize()
    return container


async def get_gallery() -> Gallery:
    """Provide the process-wide gallery."""
    cont = await get_container()
    return cont.gallery
