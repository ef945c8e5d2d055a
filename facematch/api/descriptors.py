"""Pairwise comparison and grouping endpoints."""
from fastapi import APIRouter, HTTPException

from facematch.api.models.descriptor import (
    DistanceRequest,
    DistanceResponse,
    GroupRequest,
    GroupResponse,
    VerificationRequest,
    VerificationResponse,
)
from facematch.core.exceptions import DimensionMismatchError, InvalidDescriptorError
from facematch.core.logging import get_logger
from facematch.services.clustering import group_all, summarize
from facematch.services.scoring import distance, similarity_percent
from facematch.services.verification import verify

logger = get_logger(__name__)
router = APIRouter(
    responses={
        400: {"description": "Invalid descriptor"},
    }
)


@router.post(
    "/distance",
    response_model=DistanceResponse,
    summary="Distance between two descriptors",
)
async def compare_descriptors(request: DistanceRequest) -> DistanceResponse:
    """Return the Euclidean distance and similarity percentage of two descriptors."""
    try:
        d = distance(request.a, request.b)
    except (DimensionMismatchError, InvalidDescriptorError) as e:
        logger.warning("Rejected descriptor pair", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    return DistanceResponse(distance=d, similarity=similarity_percent(d))


@router.post(
    "/verify",
    response_model=VerificationResponse,
    summary="Verify a probe against a reference",
    description="One-to-one verification: a match when the distance is strictly below the threshold.",
)
async def verify_descriptor(request: VerificationRequest) -> VerificationResponse:
    """Verify a probe descriptor against a reference descriptor."""
    try:
        result = verify(request.reference, request.probe, request.threshold)
    except (DimensionMismatchError, InvalidDescriptorError) as e:
        logger.warning("Rejected verification request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Verified descriptor", is_match=result.is_match, distance=result.distance)
    return VerificationResponse.from_result(result)


@router.post(
    "/group",
    response_model=GroupResponse,
    summary="Group descriptors by identity",
    description=(
        "Single-pass greedy grouping: each face joins the first group whose first "
        "member is within the threshold, otherwise it starts a new group."
    ),
)
async def group_descriptors(request: GroupRequest) -> GroupResponse:
    """Group faces from several images into clusters of the same person."""
    try:
        clusters = group_all(
            ((item.source_id, item.descriptor) for item in request.items),
            request.threshold,
        )
    except (DimensionMismatchError, InvalidDescriptorError) as e:
        logger.warning("Rejected grouping request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    return GroupResponse(clusters=summarize(clusters))
