# ============================================================================
# Planimetry - Sinks Package
#
# Purpose: Message log sinks and a config-driven factory
# Inputs: SinkConfig
# Outputs: Public API exports
# Dependencies: None
# Usage: from Planimetry.sinks import ConsoleSink, FileSink, create_sinks
#
# Changelog:
#   2026-03-04: Initial sinks package
#   2026-03-10: Added create_sinks factory
# ============================================================================

from typing import List

from Planimetry.config import SinkConfig
from Planimetry.sinks.base import LogSink
from Planimetry.sinks.console import ConsoleSink
from Planimetry.sinks.file_sink import FileSink


def create_sinks(config: SinkConfig) -> List[LogSink]:
    """
    Build the sinks selected by ``config.type``.

    Returns:
        Console sink first (if selected), then the file sink (if selected)

    Raises:
        SinkOpenFailedError: If the file sink cannot open its file
    """
    sinks: List[LogSink] = []
    if config.type in ("console", "both"):
        sinks.append(ConsoleSink(color=config.console_color))
    if config.type in ("file", "both"):
        sinks.append(FileSink(config.file_path, encoding=config.encoding))
    return sinks


__all__ = [
    "LogSink",
    "ConsoleSink",
    "FileSink",
    "create_sinks",
]
