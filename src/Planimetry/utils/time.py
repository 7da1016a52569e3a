# ============================================================================
# Planimetry - Time Utilities
#
# Purpose: Timestamp formatting for log entries and session sentinels
# Inputs: datetime values
# Outputs: Formatted timestamp strings
# Dependencies: datetime
# Usage: stamp = format_clock_time(datetime.now())
#
# Changelog:
#   2026-03-04: Initial time utilities for FileSink
# ============================================================================

from datetime import datetime


def format_clock_time(moment: datetime) -> str:
    """
    Format the wall-clock part of a timestamp.

    Returns:
        Time string such as "14:05:09"
    """
    return moment.strftime("%H:%M:%S")


def format_session_timestamp(moment: datetime) -> str:
    """
    Format a full local timestamp for session sentinel lines.

    Returns:
        Timestamp string such as "2026-03-04 14:05:09"
    """
    return moment.strftime("%Y-%m-%d %H:%M:%S")
