# ============================================================================
# Planimetry - Sink Tests
#
# Purpose: Test ConsoleSink, FileSink lifecycle and the create_sinks factory
# Inputs: Temporary log files, in-memory streams
# Outputs: Test pass/fail
# Dependencies: pytest, Planimetry
# Usage: pytest tests/test_sinks.py -v
#
# Changelog:
#   2026-03-04: Initial sink tests
#   2026-03-09: Release idempotency, closed-sink and open-failure tests
#   2026-03-10: create_sinks routing tests
# ============================================================================

import io
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from Planimetry.config import SinkConfig
from Planimetry.errors import SinkClosedError, SinkError, SinkOpenFailedError
from Planimetry.sinks import ConsoleSink, FileSink, LogSink, create_sinks


def _read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


# ============================================================================
# ConsoleSink Tests
# ============================================================================


class TestConsoleSink:
    def test_formats_entry(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)
        sink.log_info("Program started.")
        assert stream.getvalue() == "[LOG: Console] Program started.\n"

    def test_one_line_per_message_in_order(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream)
        sink.log_info("first")
        sink.log_info("second")
        assert stream.getvalue().splitlines() == ["[LOG: Console] first", "[LOG: Console] second"]

    def test_color_wraps_in_ansi_green(self):
        stream = io.StringIO()
        ConsoleSink(stream=stream, color=True).log_info("hi")
        assert stream.getvalue() == "\033[32m[LOG: Console] hi\033[0m\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleSink().log_info("to stdout")
        assert capsys.readouterr().out == "[LOG: Console] to stdout\n"

    def test_close_is_noop(self):
        stream = io.StringIO()
        with ConsoleSink(stream=stream) as sink:
            sink.log_info("inside")
        assert not sink.closed
        sink.log_info("after")
        assert len(stream.getvalue().splitlines()) == 2


# ============================================================================
# FileSink Tests
# ============================================================================


class TestFileSink:
    def test_session_with_two_messages_has_four_lines(self, log_path, fixed_clock):
        with FileSink(log_path, clock=fixed_clock) as sink:
            sink.log_info("Triangle has 3 vertices.")
            sink.log_info("Convex quadrilateral has 4 vertices.")

        assert _read_lines(log_path) == [
            "[LOG: File] 14:05:09 | --- session started (2026-03-04 14:05:09) ---",
            "[LOG: File] 14:05:09 | Triangle has 3 vertices.",
            "[LOG: File] 14:05:09 | Convex quadrilateral has 4 vertices.",
            "[LOG: File] 14:05:09 | --- session ended (2026-03-04 14:05:09) ---",
        ]

    def test_creates_missing_file(self, log_path):
        assert not log_path.exists()
        sink = FileSink(log_path)
        assert log_path.exists()
        sink.close()

    def test_entries_flushed_before_close(self, log_path, fixed_clock):
        sink = FileSink(log_path, clock=fixed_clock)
        sink.log_info("durable")
        assert _read_lines(log_path)[-1] == "[LOG: File] 14:05:09 | durable"
        sink.close()

    def test_appends_across_sessions(self, log_path, fixed_clock):
        with FileSink(log_path, clock=fixed_clock) as sink:
            sink.log_info("one")
        with FileSink(log_path, clock=fixed_clock) as sink:
            sink.log_info("two")

        lines = _read_lines(log_path)
        assert len(lines) == 6
        assert lines[1].endswith("| one")
        assert lines[4].endswith("| two")

    def test_double_close_writes_single_end_sentinel(self, log_path, fixed_clock):
        sink = FileSink(log_path, clock=fixed_clock)
        sink.log_info("msg")
        sink.close()
        sink.close()

        lines = _read_lines(log_path)
        assert len(lines) == 3
        assert sum("session ended" in line for line in lines) == 1
        assert sink.closed

    def test_close_after_context_exit_is_harmless(self, log_path):
        with FileSink(log_path) as sink:
            pass
        sink.close()
        assert sum("session ended" in line for line in _read_lines(log_path)) == 1

    def test_log_after_close_reports_error(self, log_path):
        sink = FileSink(log_path)
        sink.close()
        with pytest.raises(SinkClosedError):
            sink.log_info("too late")
        assert not any("too late" in line for line in _read_lines(log_path))

    def test_released_when_scope_exits_with_error(self, log_path):
        with pytest.raises(RuntimeError):
            with FileSink(log_path) as sink:
                sink.log_info("before failure")
                raise RuntimeError("boom")

        assert sink.closed
        lines = _read_lines(log_path)
        assert "session ended" in lines[-1]

    def test_timestamp_prefix_uses_clock(self, log_path):
        moments = iter(
            [
                datetime(2026, 1, 1, 8, 0, 0),
                datetime(2026, 1, 1, 8, 0, 0),
                datetime(2026, 1, 1, 23, 59, 58),
                datetime(2026, 1, 1, 23, 59, 59),
                datetime(2026, 1, 1, 23, 59, 59),
            ]
        )
        with FileSink(log_path, clock=lambda: next(moments)) as sink:
            sink.log_info("late")

        lines = _read_lines(log_path)
        assert lines[0] == "[LOG: File] 08:00:00 | --- session started (2026-01-01 08:00:00) ---"
        assert lines[1] == "[LOG: File] 23:59:58 | late"

    def test_utf8_messages(self, log_path):
        with FileSink(log_path) as sink:
            sink.log_info("Трикутник має 3 вершини")
        assert "Трикутник має 3 вершини" in log_path.read_text(encoding="utf-8")

    def test_open_failure_raises_sink_open_failed(self, tmp_path):
        missing_dir = tmp_path / "does-not-exist" / "log.txt"
        with pytest.raises(SinkOpenFailedError) as exc_info:
            FileSink(missing_dir)
        assert exc_info.value.path == str(missing_dir)
        assert isinstance(exc_info.value, SinkError)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_open_failure_on_directory(self, tmp_path):
        with pytest.raises(SinkOpenFailedError):
            FileSink(tmp_path)

    def test_handle_closed_even_if_end_sentinel_fails(self, log_path):
        sink = FileSink(log_path)
        sink._handle.close()
        failing = MagicMock()
        failing.write.side_effect = OSError("disk full")
        sink._handle = failing

        with pytest.raises(OSError):
            sink.close()

        assert sink.closed
        failing.close.assert_called_once()
        sink.close()
        failing.close.assert_called_once()

    def test_is_log_sink(self, log_path):
        with FileSink(log_path) as sink:
            assert isinstance(sink, LogSink)
            assert not sink.closed


# ============================================================================
# create_sinks Tests
# ============================================================================


class TestCreateSinks:
    def test_both(self, log_path):
        sinks = create_sinks(SinkConfig(type="both", file_path=str(log_path), console_color=False))
        try:
            assert [type(s) for s in sinks] == [ConsoleSink, FileSink]
            assert sinks[0].color is False
            assert sinks[1].path == log_path
        finally:
            for sink in sinks:
                sink.close()

    def test_console_only_does_not_touch_file(self, log_path):
        sinks = create_sinks(SinkConfig(type="console", file_path=str(log_path)))
        assert len(sinks) == 1
        assert isinstance(sinks[0], ConsoleSink)
        assert not log_path.exists()

    def test_file_only(self, log_path):
        sinks = create_sinks(SinkConfig(type="file", file_path=str(log_path)))
        assert len(sinks) == 1
        sinks[0].close()
        assert len(_read_lines(log_path)) == 2

    def test_open_failure_propagates(self, tmp_path):
        with pytest.raises(SinkOpenFailedError):
            create_sinks(SinkConfig(type="file", file_path=str(tmp_path / "missing" / "log.txt")))
