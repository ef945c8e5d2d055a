"""API v1 router initialization."""
from fastapi import APIRouter

from .descriptors import router as descriptors_router
from .gallery import router as gallery_router

# Create v1 router
router = APIRouter()

router.include_router(
    descriptors_router,
    prefix="/descriptors",
    tags=["descriptors"]
)
router.include_router(
    gallery_router,
    prefix="/gallery",
    tags=["gallery"]
)
