"""Verification, matching and grouping value objects."""
import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class VerificationResult(BaseModel):
    """Result of a one-to-one comparison."""
    is_match: bool = Field(..., description="Whether the distance is strictly below the threshold")
    distance: float = Field(..., description="Euclidean distance between reference and probe", ge=0.0)
    score: float = Field(..., description="Similarity percentage, clamped at 0", ge=0.0)

    @property
    def rounded_percentage(self) -> int:
        """Score rounded half-up to a whole percentage, as shown to the user."""
        return int(math.floor(self.score + 0.5))


class MatchResult(BaseModel):
    """Best gallery match for a probe.

    A result without a label is "no match": nothing in the gallery was within
    the threshold. `distance` is still the closest distance seen, or None when
    the gallery was empty.
    """
    label: Optional[str] = Field(None, description="Matched label, None when no match")
    distance: Optional[float] = Field(None, description="Distance to the closest exemplar", ge=0.0)

    @classmethod
    def no_match(cls, distance: Optional[float] = None) -> "MatchResult":
        return cls(label=None, distance=distance)

    @property
    def matched(self) -> bool:
        return self.label is not None

    def display_label(self, unknown_label: str = "unknown") -> str:
        """Text drawn next to a face box, e.g. ``"alice (0.42)"``."""
        label = self.label if self.label is not None else unknown_label
        if self.distance is None:
            return label
        return f"{label} ({round(self.distance, 2)})"


class ClusterSummary(BaseModel):
    """Host-facing view of a cluster without the raw descriptors."""
    index: int = Field(..., description="Position of the cluster in creation order", ge=0)
    size: int = Field(..., description="Number of members", ge=1)
    source_ids: List[Any] = Field(..., description="Member source ids in acceptance order")
