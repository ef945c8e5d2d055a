"""In-memory gallery of labeled descriptors with nearest-neighbour lookup."""
import threading
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from facematch.core.exceptions import DimensionMismatchError, EmptyLabelError
from facematch.core.logging import get_logger
from facematch.domain.entities.descriptor import Descriptor, DescriptorLike, as_descriptor
from facematch.domain.entities.gallery import LabeledDescriptors
from facematch.domain.value_objects.matching import MatchResult
from facematch.services.scoring import distance

logger = get_logger(__name__)

Aggregation = Literal["nearest", "mean"]


class Gallery:
    """
    Append-only collection of labeled descriptors.

    Responsibilities:
        - Register descriptors under a label, several exemplars per label
        - Find the closest label for a probe, or report no match

    Entries keep insertion order; lookups scan in that order and the first of
    several equally close candidates wins. Writers are serialized by a lock.
    Lookups work on a snapshot taken under the same lock, so concurrent
    lookups are safe while nothing is being added.

    Aggregation:
        - ``"nearest"``: a label's distance is its closest exemplar.
        - ``"mean"``: a label's distance is the mean over its exemplars.

    Example:
        ```python
        gallery = Gallery()
        gallery.add_labeled("alice", alice_descriptor)
        result = gallery.find_best_match(probe, threshold=0.6)
        print(result.display_label())
        ```
    """

    def __init__(self, dimension: Optional[int] = None, aggregation: Aggregation = "nearest"):
        if aggregation not in ("nearest", "mean"):
            raise ValueError(f"Unsupported aggregation: {aggregation}")
        self.aggregation = aggregation
        self._dimension = dimension
        self._entries: List[LabeledDescriptors] = []
        self._index: Dict[str, int] = {}
        self._lock = threading.Lock()

    @property
    def dimension(self) -> Optional[int]:
        """Descriptor length, fixed by the constructor or the first descriptor added."""
        return self._dimension

    @property
    def labels(self) -> List[str]:
        with self._lock:
            return [entry.label for entry in self._entries]

    @property
    def entries(self) -> List[LabeledDescriptors]:
        """Copies of the entries in insertion order."""
        with self._lock:
            return [
                LabeledDescriptors(label=entry.label, descriptors=list(entry.descriptors))
                for entry in self._entries
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def descriptors_for(self, label: str) -> List[Descriptor]:
        """Exemplars registered under `label`, empty if the label is unknown."""
        with self._lock:
            idx = self._index.get(label)
            if idx is None:
                return []
            return list(self._entries[idx].descriptors)

    def add_labeled(self, label: str, descriptor: DescriptorLike) -> None:
        """
        Register a descriptor under a label.

        A new label creates an entry at the end of the gallery; a known label
        gets the descriptor appended to its exemplars. On error the gallery is
        left unchanged.

        Raises:
            EmptyLabelError: If the label is empty or only whitespace
            TypeError: If the label is not a string
            DimensionMismatchError: If the descriptor length differs from the gallery's
        """
        if not isinstance(label, str):
            raise TypeError(f"Label must be a string, got {type(label).__name__}")
        if not label.strip():
            raise EmptyLabelError("Label must not be empty", details={"label": label})

        desc = as_descriptor(descriptor)

        with self._lock:
            if self._dimension is not None and desc.dimension != self._dimension:
                raise DimensionMismatchError(expected=self._dimension, actual=desc.dimension)
            if self._dimension is None:
                self._dimension = desc.dimension

            idx = self._index.get(label)
            if idx is None:
                self._index[label] = len(self._entries)
                self._entries.append(LabeledDescriptors(label=label, descriptors=[desc]))
                exemplars = 1
            else:
                self._entries[idx].descriptors.append(desc)
                exemplars = self._entries[idx].count

        logger.debug("Added labeled descriptor", label=label, exemplars=exemplars)

    def _snapshot(self) -> List[Tuple[str, Tuple[Descriptor, ...]]]:
        with self._lock:
            return [(entry.label, tuple(entry.descriptors)) for entry in self._entries]

    def _label_distance(self, probe: Descriptor, descriptors: Iterable[Descriptor]) -> float:
        distances = [distance(exemplar, probe) for exemplar in descriptors]
        if self.aggregation == "mean":
            return sum(distances) / len(distances)
        return min(distances)

    def find_best_match(self, probe: DescriptorLike, threshold: float) -> MatchResult:
        """
        Find the closest label to a probe.

        Args:
            probe: Descriptor to look up
            threshold: Maximum distance, exclusive

        Returns:
            MatchResult with the label and distance of the global minimum when
            it is below the threshold, otherwise a no-match result carrying
            the closest distance seen (None for an empty gallery).

        Raises:
            DimensionMismatchError: If the probe length differs from the gallery's,
                including a configured dimension while the gallery is still empty
        """
        desc = as_descriptor(probe)
        snapshot = self._snapshot()
        if self._dimension is not None and desc.dimension != self._dimension:
            raise DimensionMismatchError(expected=self._dimension, actual=desc.dimension)
        if not snapshot:
            return MatchResult.no_match()

        best_label: Optional[str] = None
        best_distance = float("inf")
        for label, descriptors in snapshot:
            d = self._label_distance(desc, descriptors)
            # strict "<" keeps the earliest entry on ties
            if d < best_distance:
                best_label = label
                best_distance = d

        if best_distance < threshold:
            return MatchResult(label=best_label, distance=best_distance)
        return MatchResult.no_match(distance=best_distance)

    def find_best_matches(self, probes: Iterable[DescriptorLike], threshold: float) -> List[MatchResult]:
        """Look up every probe found in one frame, in input order."""
        return [self.find_best_match(probe, threshold) for probe in probes]
