# ============================================================================
# Planimetry - Console Sink
#
# Purpose: Write log entries to a text stream (stdout by default)
# Inputs: Message strings
# Outputs: "[LOG: Console] <message>" lines
# Dependencies: sys, base
# Usage: ConsoleSink(color=True).log_info("started")
#
# Changelog:
#   2026-03-04: Initial ConsoleSink
#   2026-03-06: Optional ANSI green colouring
# ============================================================================

import sys
from typing import Optional, TextIO

from Planimetry.sinks.base import LogSink

GREEN = "\033[32m"
RESET = "\033[0m"


class ConsoleSink(LogSink):
    """
    Stateless sink that writes each entry to a stream and flushes it.
    """

    prefix = "[LOG: Console]"

    def __init__(self, stream: Optional[TextIO] = None, color: bool = False):
        """
        Args:
            stream: Target stream; resolved to sys.stdout at write time when None
            color: Wrap entries in ANSI green
        """
        self._stream = stream
        self.color = color

    def format_entry(self, message: str) -> str:
        return f"{self.prefix} {message}"

    def log_info(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        entry = self.format_entry(message)
        if self.color:
            entry = f"{GREEN}{entry}{RESET}"
        stream.write(entry + "\n")
        stream.flush()
