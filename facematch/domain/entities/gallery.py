"""Labeled descriptor entities held by a gallery."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .descriptor import Descriptor


class LabeledDescriptors(BaseModel):
    """A label with every exemplar descriptor registered under it."""
    label: str = Field(..., description="Identity label, non-empty")
    descriptors: List[Descriptor] = Field(..., description="Exemplars in insertion order")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def count(self) -> int:
        return len(self.descriptors)
