"""API specific descriptor models."""
from typing import List, Optional

from pydantic import BaseModel, Field

from facematch.domain.value_objects.matching import ClusterSummary, MatchResult, VerificationResult
from facematch.core.config import settings

MIN_THRESHOLD = 0.0


class DistanceRequest(BaseModel):
    """Request model for the /descriptors/distance endpoint."""
    a: List[float] = Field(..., description="First descriptor", min_length=1)
    b: List[float] = Field(..., description="Second descriptor", min_length=1)


class DistanceResponse(BaseModel):
    """Response model for the /descriptors/distance endpoint."""
    distance: float = Field(..., description="Euclidean distance")
    similarity: float = Field(..., description="Similarity percentage, clamped at 0")


class VerificationRequest(BaseModel):
    """Request model for the /descriptors/verify endpoint."""
    reference: List[float] = Field(..., description="Enrolled descriptor", min_length=1)
    probe: List[float] = Field(..., description="Descriptor to verify", min_length=1)
    threshold: float = Field(
        default_factory=lambda: settings.VERIFICATION_THRESHOLD,
        description="Maximum distance for a match (exclusive)",
        gt=MIN_THRESHOLD,
    )


class VerificationResponse(BaseModel):
    """Response model for the /descriptors/verify endpoint."""
    is_match: bool
    distance: float
    score: float
    percentage: int = Field(..., description="Score rounded to a whole percentage")

    @classmethod
    def from_result(cls, result: VerificationResult) -> "VerificationResponse":
        return cls(
            is_match=result.is_match,
            distance=result.distance,
            score=result.score,
            percentage=result.rounded_percentage,
        )


class LabeledDescriptorRequest(BaseModel):
    """Request model for the /gallery/labels endpoint."""
    label: str = Field(..., description="Identity label")
    descriptor: List[float] = Field(..., description="Exemplar descriptor", min_length=1)


class GalleryEntry(BaseModel):
    """API model for one gallery label."""
    label: str
    exemplars: int = Field(..., ge=1)


class GalleryResponse(BaseModel):
    """Response model for the /gallery endpoint."""
    dimension: Optional[int] = None
    entries: List[GalleryEntry]


class MatchRequest(BaseModel):
    """Request model for the /gallery/match endpoint."""
    probes: List[List[float]] = Field(..., description="Descriptors found in one frame", min_length=1)
    threshold: float = Field(
        default_factory=lambda: settings.MATCH_THRESHOLD,
        description="Maximum distance for a match (exclusive)",
        gt=MIN_THRESHOLD,
    )


class MatchItem(BaseModel):
    """API model for a single probe's best match."""
    label: Optional[str] = None
    distance: Optional[float] = None
    matched: bool
    display: str = Field(..., description="Label as drawn next to the face box")

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchItem":
        return cls(
            label=result.label,
            distance=result.distance,
            matched=result.matched,
            display=result.display_label(settings.UNKNOWN_LABEL),
        )


class MatchResponse(BaseModel):
    """Response model for the /gallery/match endpoint."""
    matches: List[MatchItem]


class GroupItem(BaseModel):
    """One face to group, tagged with the image it came from."""
    source_id: str = Field(..., description="Image or frame identifier")
    descriptor: List[float] = Field(..., min_length=1)


class GroupRequest(BaseModel):
    """Request model for the /descriptors/group endpoint."""
    items: List[GroupItem] = Field(..., description="Faces in upload order")
    threshold: float = Field(
        default_factory=lambda: settings.GROUPING_THRESHOLD,
        description="Maximum distance to a cluster representative (exclusive)",
        gt=MIN_THRESHOLD,
    )


class GroupResponse(BaseModel):
    """Response model for the /descriptors/group endpoint."""
    clusters: List[ClusterSummary]
