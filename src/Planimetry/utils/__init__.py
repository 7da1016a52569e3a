# ============================================================================
# Planimetry - Utils Package
#
# Purpose: Shared utility functions
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from Planimetry.utils import format_clock_time
#
# Changelog:
#   2026-03-04: Initial utils package
# ============================================================================

from Planimetry.utils.time import format_clock_time, format_session_timestamp

__all__ = ["format_clock_time", "format_session_timestamp"]
