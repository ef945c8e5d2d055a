"""Cluster entities produced by incremental grouping."""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field

from .descriptor import Descriptor


class ClusterMember(BaseModel):
    """A descriptor together with the id of the source it was extracted from."""
    source_id: Any = Field(..., description="Caller-defined source identifier (image, frame, ...)")
    descriptor: Descriptor = Field(..., description="Face descriptor")

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Cluster(BaseModel):
    """Ordered group of members believed to be the same person.

    The first member is the representative. Members are only ever appended,
    so the representative never changes.
    """
    members: List[ClusterMember] = Field(..., min_length=1, description="Members in acceptance order")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def representative(self) -> ClusterMember:
        return self.members[0]

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def source_ids(self) -> List[Any]:
        return [member.source_id for member in self.members]
