# ============================================================================
# Planimetry - Error Classes
#
# Purpose: Custom exception hierarchy for the package
# Inputs: Error messages and context
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise WrongVertexCountError(expected=3, actual=2)
#
# Changelog:
#   2026-03-02: Initial error classes
#   2026-03-09: Added SinkOpenFailedError and SinkClosedError for FileSink lifecycle
# ============================================================================

from typing import Optional


class PlanimetryError(Exception):
    """Base exception for all Planimetry errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(PlanimetryError):
    """Raised when configuration is invalid or missing."""

    pass


class FigureValidationError(PlanimetryError):
    """Raised when a vertex set is rejected by a figure."""

    pass


class WrongVertexCountError(FigureValidationError):
    """Raised when the number of supplied vertices does not match the figure."""

    def __init__(self, expected: int, actual: int, figure: Optional[str] = None):
        subject = figure or "Figure"
        super().__init__(f"{subject} requires {expected} vertices, got {actual}")
        self.expected = expected
        self.actual = actual


class NotConvexError(FigureValidationError):
    """Raised when quadrilateral vertices do not form a convex polygon."""

    pass


class SinkError(PlanimetryError):
    """Raised when a log sink operation fails."""

    pass


class SinkOpenFailedError(SinkError):
    """Raised when a file sink cannot open its target file."""

    def __init__(self, path: str, details: Optional[str] = None):
        super().__init__(f"Failed to open log file {path}", details=details)
        self.path = path


class SinkClosedError(SinkError):
    """Raised when logging through a sink that has already been released."""

    pass
