"""Matching, verification and grouping services."""
from .clustering import IncrementalClusterer, group_all, summarize
from .face_grouping import FaceGroupingService
from .face_verification import FaceVerificationService
from .gallery import Gallery
from .scoring import distance, similarity_percent
from .verification import verify

__all__ = [
    "distance",
    "similarity_percent",
    "verify",
    "Gallery",
    "IncrementalClusterer",
    "group_all",
    "summarize",
    "FaceGroupingService",
    "FaceVerificationService",
]
