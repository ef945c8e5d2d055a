"""Domain entities package."""
from .descriptor import Descriptor, DescriptorLike, as_descriptor, ensure_same_dimension
from .gallery import LabeledDescriptors
from .cluster import Cluster, ClusterMember

__all__ = [
    "Descriptor",
    "DescriptorLike",
    "as_descriptor",
    "ensure_same_dimension",
    "LabeledDescriptors",
    "Cluster",
    "ClusterMember",
]
