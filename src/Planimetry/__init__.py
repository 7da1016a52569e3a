# ============================================================================
# Planimetry - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from Planimetry import Triangle, FileSink
#
# Changelog:
#   2026-03-02: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from Planimetry.config import Config
from Planimetry.errors import (
    FigureValidationError,
    NotConvexError,
    PlanimetryError,
    SinkClosedError,
    SinkError,
    SinkOpenFailedError,
    WrongVertexCountError,
)
from Planimetry.geometry import ConvexQuadrilateral, Figure, Point, Triangle
from Planimetry.sinks import ConsoleSink, FileSink, LogSink

__all__ = [
    "__version__",
    "Config",
    "Point",
    "Figure",
    "Triangle",
    "ConvexQuadrilateral",
    "LogSink",
    "ConsoleSink",
    "FileSink",
    "PlanimetryError",
    "FigureValidationError",
    "WrongVertexCountError",
    "NotConvexError",
    "SinkError",
    "SinkOpenFailedError",
    "SinkClosedError",
]
