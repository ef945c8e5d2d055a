"""Gallery registration and recognition endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from facematch.api.models.descriptor import (
    GalleryEntry,
    GalleryResponse,
    LabeledDescriptorRequest,
    MatchItem,
    MatchRequest,
    MatchResponse,
)
from facematch.core.exceptions import DimensionMismatchError, EmptyLabelError, InvalidDescriptorError
from facematch.core.logging import get_logger
from facematch.infrastructure.dependencies import get_gallery
from facematch.services.gallery import Gallery

logger = get_logger(__name__)
router = APIRouter(
    responses={
        400: {"description": "Invalid request"},
    }
)


@router.get(
    "",
    response_model=GalleryResponse,
    summary="List gallery labels",
)
async def list_gallery(gallery: Gallery = Depends(get_gallery)) -> GalleryResponse:
    """Return every label in insertion order with its exemplar count."""
    return GalleryResponse(
        dimension=gallery.dimension,
        entries=[GalleryEntry(label=e.label, exemplars=e.count) for e in gallery.entries],
    )


@router.post(
    "/labels",
    response_model=GalleryResponse,
    status_code=201,
    summary="Add a labeled descriptor",
    description="Creates the label, or adds another exemplar if the label already exists.",
)
async def add_labeled_descriptor(
    request: LabeledDescriptorRequest,
    gallery: Gallery = Depends(get_gallery)
) -> GalleryResponse:
    """Register a descriptor under a label.

    Raises:
        HTTPException: 400 on a blank label or a descriptor of the wrong length
    """
    try:
        gallery.add_labeled(request.label, request.descriptor)
    except (EmptyLabelError, DimensionMismatchError, InvalidDescriptorError) as e:
        logger.warning("Rejected labeled descriptor", label=request.label, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Registered labeled descriptor", label=request.label)
    return await list_gallery(gallery)


@router.post(
    "/match",
    response_model=MatchResponse,
    summary="Recognize faces against the gallery",
)
async def match_descriptors(
    request: MatchRequest,
    gallery: Gallery = Depends(get_gallery)
) -> MatchResponse:
    """Find the best gallery label for every probe, in request order."""
    try:
        results = gallery.find_best_matches(request.probes, request.threshold)
    except (DimensionMismatchError, InvalidDescriptorError) as e:
        logger.warning("Rejected match request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "Matched probes against gallery",
        probes=len(results),
        matched=sum(1 for r in results if r.matched),
    )
    return MatchResponse(matches=[MatchItem.from_result(r) for r in results])
