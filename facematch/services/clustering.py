"""Greedy incremental grouping of descriptors into clusters.

Each cluster is represented by its first member only. An incoming descriptor
joins the first cluster, in creation order, whose representative is strictly
closer than the threshold; otherwise it starts a new cluster. The result
depends on input order and is not transitive: two members of one cluster may
be far apart from each other as long as both are close to the representative.
"""
import threading
from typing import Any, Iterable, List, Optional, Tuple

from facematch.core.exceptions import DimensionMismatchError
from facematch.core.logging import get_logger
from facematch.domain.entities.cluster import Cluster, ClusterMember
from facematch.domain.entities.descriptor import DescriptorLike, as_descriptor
from facematch.domain.value_objects.matching import ClusterSummary
from facematch.services.scoring import distance

logger = get_logger(__name__)


class IncrementalClusterer:
    """Stateful clusterer fed one descriptor at a time.

    Calls to `add` are serialized by a lock so the creation order of clusters
    and the acceptance order of members match the order of the calls.
    """

    def __init__(self, threshold: float):
        self.threshold = threshold
        self._clusters: List[Cluster] = []
        self._dimension: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    @property
    def clusters(self) -> List[Cluster]:
        """Snapshot of the clusters in creation order."""
        with self._lock:
            return [Cluster(members=list(cluster.members)) for cluster in self._clusters]

    def __len__(self) -> int:
        with self._lock:
            return len(self._clusters)

    def add(self, source_id: Any, descriptor: DescriptorLike) -> int:
        """
        Place a descriptor into a cluster.

        Args:
            source_id: Identifier of the image or frame the descriptor came from
            descriptor: Face descriptor

        Returns:
            Index of the cluster that received the descriptor

        Raises:
            DimensionMismatchError: If the length differs from the first descriptor seen
        """
        desc = as_descriptor(descriptor)
        member = ClusterMember(source_id=source_id, descriptor=desc)

        with self._lock:
            if self._dimension is None:
                self._dimension = desc.dimension
            elif desc.dimension != self._dimension:
                raise DimensionMismatchError(expected=self._dimension, actual=desc.dimension)

            for idx, cluster in enumerate(self._clusters):
                if distance(cluster.representative.descriptor, desc) < self.threshold:
                    cluster.members.append(member)
                    return idx

            self._clusters.append(Cluster(members=[member]))
            return len(self._clusters) - 1


def group_all(items: Iterable[Tuple[Any, DescriptorLike]], threshold: float) -> List[Cluster]:
    """
    Partition (source id, descriptor) pairs into clusters in a single pass.

    Args:
        items: Pairs in input order
        threshold: Maximum distance to a cluster representative, exclusive

    Returns:
        Clusters in creation order, members in acceptance order. Empty input
        gives an empty list.

    Raises:
        DimensionMismatchError: If any descriptor length differs from the first one.
            No clusters are returned in that case.
    """
    clusterer = IncrementalClusterer(threshold)
    count = 0
    for source_id, descriptor in items:
        clusterer.add(source_id, descriptor)
        count += 1

    clusters = clusterer.clusters
    logger.debug("Grouped descriptors", descriptors=count, clusters=len(clusters), threshold=threshold)
    return clusters


def summarize(clusters: List[Cluster]) -> List[ClusterSummary]:
    """Drop raw descriptors and number the clusters for display."""
    return [
        ClusterSummary(index=idx, size=cluster.size, source_ids=cluster.source_ids)
        for idx, cluster in enumerate(clusters)
    ]
