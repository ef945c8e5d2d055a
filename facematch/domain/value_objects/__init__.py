"""Value objects package."""
from .matching import ClusterSummary, MatchResult, VerificationResult

__all__ = ["ClusterSummary", "MatchResult", "VerificationResult"]
