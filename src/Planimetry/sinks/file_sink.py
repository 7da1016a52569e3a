# ============================================================================
# Planimetry - File Sink
#
# Purpose: Append timestamped log entries to a UTF-8 text file
# Inputs: Message strings
# Outputs: "[LOG: File] HH:MM:SS | <message>" lines framed by session sentinels
# Dependencies: datetime, base, errors, logging_utils, utils.time
# Usage: with FileSink("log.txt") as sink: sink.log_info("hello")
#
# Changelog:
#   2026-03-04: Initial FileSink with open/closed lifecycle
#   2026-03-09: Open failures raise SinkOpenFailedError; logging after close
#               raises SinkClosedError; close() is idempotent
# ============================================================================

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from Planimetry.errors import SinkClosedError, SinkOpenFailedError
from Planimetry.logging_utils import get_logger
from Planimetry.sinks.base import LogSink
from Planimetry.utils.time import format_clock_time, format_session_timestamp

logger = get_logger(__name__)


class FileSink(LogSink):
    """
    Sink that owns an append-mode file handle for the lifetime of a session.

    The file is opened on construction and a start sentinel is written; every
    entry is flushed before ``log_info`` returns. ``close`` writes the end
    sentinel and releases the handle exactly once. The sink is not safe for
    concurrent use from several threads.
    """

    prefix = "[LOG: File]"

    def __init__(
        self,
        path: Union[str, Path] = "log.txt",
        encoding: str = "utf-8",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Open the log file and start a session.

        Args:
            path: Log file path; created if absent, appended to otherwise
            encoding: Text encoding of the file
            clock: Returns the current local time (datetime.now by default)

        Raises:
            SinkOpenFailedError: If the file cannot be opened
        """
        self.path = Path(path)
        self._clock = clock or datetime.now
        self._handle: Optional[TextIO] = None

        try:
            self._handle = open(self.path, "a", encoding=encoding)
        except OSError as e:
            logger.error(f"Failed to open log file {self.path}: {e}")
            raise SinkOpenFailedError(str(self.path), details=str(e)) from e

        try:
            self.log_info(f"--- session started ({format_session_timestamp(self._clock())}) ---")
        except OSError as e:
            handle, self._handle = self._handle, None
            handle.close()
            raise SinkOpenFailedError(str(self.path), details=str(e)) from e
        logger.info(f"FileSink opened: {self.path}")

    @property
    def closed(self) -> bool:
        return self._handle is None

    def format_entry(self, message: str) -> str:
        return f"{self.prefix} {format_clock_time(self._clock())} | {message}"

    def log_info(self, message: str) -> None:
        if self._handle is None:
            raise SinkClosedError(f"Cannot log to {self.path}: sink is closed")
        self._handle.write(self.format_entry(message) + "\n")
        self._handle.flush()

    def close(self) -> None:
        """Write the end sentinel and close the file. Later calls do nothing."""
        if self._handle is None:
            return

        try:
            self.log_info(f"--- session ended ({format_session_timestamp(self._clock())}) ---")
        finally:
            handle, self._handle = self._handle, None
            handle.close()
            logger.info(f"FileSink closed: {self.path}")
