# ============================================================================
# Planimetry - Base Log Sink Interface
#
# Purpose: Abstract base class for message log sinks
# Inputs: Message strings
# Outputs: None
# Dependencies: abc
# Usage: class MySink(LogSink): ...
#
# Changelog:
#   2026-03-04: Initial LogSink interface with context-manager release
# ============================================================================

from abc import ABC, abstractmethod


class LogSink(ABC):
    """
    Abstract base class for log sinks.

    Sinks receive informational messages and write them to a destination
    (console, file, ...). Sinks that hold resources release them in
    ``close``; using a sink as a context manager guarantees ``close`` runs
    on every exit path.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """
        Write one informational entry.

        Args:
            message: Message text

        Raises:
            SinkClosedError: If the sink has already been released
        """
        pass

    @property
    def closed(self) -> bool:
        return False

    def close(self) -> None:
        """Release any held resources. Safe to call more than once."""
        pass

    def __enter__(self) -> "LogSink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
