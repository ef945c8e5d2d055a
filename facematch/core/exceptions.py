"""Custom exceptions for the descriptor matching engine."""
from typing import Optional


class DescriptorEngineError(Exception):
    """Base exception for descriptor matching operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize descriptor engine error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.details = details or {}


class DimensionMismatchError(DescriptorEngineError):
    """Raised when two descriptors being compared have different lengths."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Descriptor dimension mismatch: expected {expected}, got {actual}",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class EmptyLabelError(DescriptorEngineError):
    """Raised when a labeled descriptor is registered with a blank label."""
    pass


class InvalidDescriptorError(DescriptorEngineError):
    """Raised when a value cannot be turned into a descriptor."""
    pass


class NoDescriptorFoundError(DescriptorEngineError):
    """Raised by an extractor when no face is found in the image."""
    pass


class NoReferenceError(DescriptorEngineError):
    """Raised when verifying before a reference descriptor has been captured."""
    pass
