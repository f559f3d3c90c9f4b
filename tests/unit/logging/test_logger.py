"""Unit tests for Logger — gating, fields, record shape and atomic writes."""

from __future__ import annotations

import io
import json
import threading
from datetime import UTC, datetime
from typing import Any, Callable

import pytest
from structlog.testing import capture_logs

from jlo.logging import Logger, LogLevel, SynchronizedSink
from jlo.testing import FailingSink, FakeClock, MemorySink

TEST_TIME = "2018-08-02T21:48:56Z"


def _logger(sink: Any, level: LogLevel | None = None) -> Logger:
    return Logger(sink, level=level, now=FakeClock().now)


class _BrokenStr:
    def __str__(self) -> str:
        raise RuntimeError("broken __str__")


def _record(sink: MemorySink) -> dict[str, Any]:
    records = sink.records()
    assert len(records) == 1
    return records[0]


# ---------------------------------------------------------------------------
# Severity methods
# ---------------------------------------------------------------------------


_SEVERITIES: list[tuple[str, LogLevel, str]] = [
    ("debug", LogLevel.DEBUG, "debug"),
    ("info", LogLevel.INFO, "info"),
    ("warning", LogLevel.WARNING, "warning"),
    ("error", LogLevel.ERROR, "error"),
    ("fatal", LogLevel.FATAL, "fatal"),
]


class TestSeverityMethods:
    @pytest.mark.parametrize(("method", "threshold", "wire"), _SEVERITIES)
    def test_simple_message(self, method: str, threshold: LogLevel, wire: str) -> None:
        sink = MemorySink()
        getattr(_logger(sink, threshold), method)("I'm real")
        assert _record(sink) == {
            "@message": "I'm real",
            "@level": wire,
            "@timestamp": TEST_TIME,
        }

    @pytest.mark.parametrize(("method", "threshold", "wire"), _SEVERITIES)
    def test_with_format_args(self, method: str, threshold: LogLevel, wire: str) -> None:
        sink = MemorySink()
        getattr(_logger(sink, threshold), method)(
            "string: %s int: %d float: %.2f bool: %t", "I'm real", 5, 0.1, True
        )
        assert _record(sink)["@message"] == "string: I'm real int: 5 float: 0.10 bool: true"
        assert _record(sink)["@level"] == wire

    def test_warn_alias(self) -> None:
        sink = MemorySink()
        _logger(sink).warn("careful")
        assert _record(sink)["@level"] == "warning"

    @pytest.mark.parametrize(
        ("template", "args", "message"),
        [
            ('I\'m "real"', (), 'I\'m "real"'),
            ("I'm %s", ('"real"',), 'I\'m "real"'),
            ("string: %s int: %d", ('"I\'m real"', 5), 'string: "I\'m real" int: 5'),
        ],
    )
    def test_double_quotes(self, template: str, args: tuple, message: str) -> None:
        sink = MemorySink()
        _logger(sink, LogLevel.DEBUG).debug(template, *args)
        assert _record(sink)["@message"] == message

    def test_zero_args_skips_interpolation(self) -> None:
        sink = MemorySink()
        _logger(sink).info("100% done, %s %d %%")
        assert _record(sink)["@message"] == "100% done, %s %d %%"

    def test_fatal_does_not_exit(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.fatal("first")
        log.fatal("second")
        assert len(sink.lines()) == 2


# ---------------------------------------------------------------------------
# Level gate
# ---------------------------------------------------------------------------


_GATE_CASES: list[tuple[str, LogLevel, bool]] = [
    ("debug", LogLevel.DEBUG, True),
    ("debug", LogLevel.INFO, False),
    ("debug", LogLevel.WARNING, False),
    ("debug", LogLevel.ERROR, False),
    ("info", LogLevel.DEBUG, True),
    ("info", LogLevel.INFO, True),
    ("info", LogLevel.WARNING, False),
    ("info", LogLevel.ERROR, False),
    ("warning", LogLevel.DEBUG, True),
    ("warning", LogLevel.INFO, True),
    ("warning", LogLevel.WARNING, True),
    ("warning", LogLevel.ERROR, False),
    ("error", LogLevel.DEBUG, True),
    ("error", LogLevel.INFO, True),
    ("error", LogLevel.WARNING, True),
    ("error", LogLevel.ERROR, True),
    ("fatal", LogLevel.FATAL, True),
]


class TestSetLogLevel:
    @pytest.mark.parametrize(("method", "threshold", "emitted"), _GATE_CASES)
    def test_threshold(self, method: str, threshold: LogLevel, emitted: bool) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.set_log_level(threshold)
        getattr(log, method)("I'm real")
        if emitted:
            assert _record(sink)["@message"] == "I'm real"
        else:
            assert sink.writes == []

    def test_warning_threshold_scenario(self) -> None:
        sink = MemorySink()
        log = _logger(sink, LogLevel.WARNING)
        log.debug("d")
        log.info("i")
        assert sink.writes == []
        log.warning("w")
        log.error("e")
        log.fatal("f")
        assert [r["@level"] for r in sink.records()] == ["warning", "error", "fatal"]

    @pytest.mark.parametrize("threshold", list(LogLevel))
    def test_fatal_is_never_gated(self, threshold: LogLevel) -> None:
        sink = MemorySink()
        _logger(sink, threshold).fatal("always")
        assert _record(sink)["@level"] == "fatal"

    def test_unknown_threshold_emits_everything(self) -> None:
        sink = MemorySink()
        log = _logger(sink, LogLevel.UNKNOWN)
        for method in ("debug", "info", "warning", "error", "fatal"):
            getattr(log, method)("m")
        assert len(sink.lines()) == 5

    def test_accepts_level_name(self) -> None:
        log = _logger(MemorySink())
        log.set_log_level("error")
        assert log.level is LogLevel.ERROR

    def test_default_threshold_is_process_default(self) -> None:
        assert Logger(MemorySink()).level is LogLevel.INFO

    def test_is_enabled_for(self) -> None:
        log = _logger(MemorySink(), LogLevel.ERROR)
        assert not log.is_enabled_for(LogLevel.WARNING)
        assert log.is_enabled_for(LogLevel.ERROR)
        assert log.is_enabled_for(LogLevel.FATAL)


# ---------------------------------------------------------------------------
# with_field / with_fields
# ---------------------------------------------------------------------------


class TestWithField:
    def test_field_in_clone_not_in_receiver(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.with_field("@request_id", "e44c2a9").info("I'm real")
        assert _record(sink) == {
            "@request_id": "e44c2a9",
            "@message": "I'm real",
            "@level": "info",
            "@timestamp": TEST_TIME,
        }

        sink.clear()
        log.info("I'm real")
        assert "@request_id" not in _record(sink)

    def test_discarded_clone_is_no_op(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.with_field("WithField", "will only be set in returned logger")
        log.info("I'm real")
        assert _record(sink) == {
            "@message": "I'm real",
            "@level": "info",
            "@timestamp": TEST_TIME,
        }
        assert dict(log.fields) == {}

    def test_chaining_accumulates(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.with_field("x", "1").with_field("y", "2").info("m")
        record = _record(sink)
        assert record["x"] == "1"
        assert record["y"] == "2"

        sink.clear()
        log.info("m")
        assert "x" not in _record(sink)
        assert "y" not in _record(sink)

    def test_siblings_do_not_contaminate(self) -> None:
        sink = MemorySink()
        parent = _logger(sink).with_field("service", "api")
        a = parent.with_field("branch", "a")
        b = parent.with_field("branch", "b")
        a.info("m")
        b.info("m")
        parent.info("m")
        branches = [r.get("branch") for r in sink.records()]
        assert branches == ["a", "b", None]
        assert all(r["service"] == "api" for r in sink.records())

    def test_overwrite_in_clone_only(self) -> None:
        sink = MemorySink()
        parent = _logger(sink).with_field("k", "old")
        child = parent.with_field("k", "new")
        child.info("m")
        parent.info("m")
        assert [r["k"] for r in sink.records()] == ["new", "old"]

    def test_arbitrary_json_values(self) -> None:
        sink = MemorySink()
        value = {"nested": [1, 2, {"deep": True}], "n": None}
        _logger(sink).with_field("count", 3).with_field("ratio", 0.5).with_field("ok", False).with_field(
            "data", value
        ).info("m")
        record = _record(sink)
        assert record["count"] == 3
        assert record["ratio"] == 0.5
        assert record["ok"] is False
        assert record["data"] == value

    def test_reserved_keys_win(self) -> None:
        sink = MemorySink()
        _logger(sink).with_field("@message", "spoofed").with_field("@level", "spoofed").error("real")
        record = _record(sink)
        assert record["@message"] == "real"
        assert record["@level"] == "error"

    def test_clone_threshold_reset_to_default(self) -> None:
        sink = MemorySink()
        log = _logger(sink, LogLevel.DEBUG)
        child = log.with_field("k", "v")
        assert child.level is LogLevel.INFO
        child.debug("hidden")
        assert sink.writes == []

    def test_clone_threshold_independent(self) -> None:
        log = _logger(MemorySink(), LogLevel.ERROR)
        child = log.with_field("k", "v")
        child.set_log_level(LogLevel.DEBUG)
        assert log.level is LogLevel.ERROR

    def test_clone_shares_sink_writer_and_time_source(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        child = log.with_field("k", "v")
        assert child._out is log._out  # noqa: SLF001
        child.info("m")
        assert _record(sink)["@timestamp"] == TEST_TIME

    def test_clone_inherits_key_names(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.field_key_msg = "msg"
        log.with_field("k", "v").info("m")
        assert _record(sink)["msg"] == "m"

    def test_with_fields_bulk(self) -> None:
        sink = MemorySink()
        _logger(sink).with_fields({"a": 1}, b=2).info("m")
        record = _record(sink)
        assert (record["a"], record["b"]) == (1, 2)

    def test_fields_view_is_read_only(self) -> None:
        log = _logger(MemorySink()).with_field("k", "v")
        with pytest.raises(TypeError):
            log.fields["k"] = "changed"  # type: ignore[index]

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(TypeError):
            _logger(MemorySink()).with_field(1, "v")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Configuration attributes and time source
# ---------------------------------------------------------------------------


class TestFieldKeys:
    def test_renamed_keys_end_to_end(self) -> None:
        sink = MemorySink()
        log = Logger(sink, now=lambda: datetime.min)
        log.field_key_level = "lvl"
        log.field_key_msg = "msg"
        log.field_key_time = "time"
        log.info("I'm real")
        assert sink.getvalue() == '{"lvl":"info","msg":"I\'m real","time":"0001-01-01T00:00:00Z"}\n'

    def test_default_keys_end_to_end(self) -> None:
        sink = MemorySink()
        Logger(sink, now=lambda: datetime.min).with_field("@request_id", "aa33ee55").info("I'm real")
        assert sink.getvalue() == (
            '{"@level":"info","@message":"I\'m real","@request_id":"aa33ee55",'
            '"@timestamp":"0001-01-01T00:00:00Z"}\n'
        )

    def test_rename_takes_effect_on_next_call(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.info("before")
        log.field_key_msg = "text"
        log.info("after")
        first, second = sink.records()
        assert first["@message"] == "before"
        assert second["text"] == "after"


class TestTimeSource:
    def test_nanosecond_time_source(self) -> None:
        sink = MemorySink()
        moment = datetime(2018, 8, 2, 21, 48, 56, tzinfo=UTC)
        ns = int(moment.timestamp()) * 1_000_000_000 + 856_339_554
        Logger(sink, now=lambda: ns).info("m")
        assert _record(sink)["@timestamp"] == "2018-08-02T21:48:56.856339554Z"

    def test_process_time_source_used_when_not_injected(self, frozen_time_source) -> None:
        sink = MemorySink()
        Logger(sink).info("m")
        assert _record(sink)["@timestamp"] == TEST_TIME

    def test_time_source_called_per_record(self) -> None:
        sink = MemorySink()
        clock = FakeClock()
        log = Logger(sink, now=clock.now)
        log.info("a")
        clock.advance(seconds=1)
        log.info("b")
        assert [r["@timestamp"] for r in sink.records()] == [TEST_TIME, "2018-08-02T21:48:57Z"]


# ---------------------------------------------------------------------------
# Framing and special characters
# ---------------------------------------------------------------------------


class TestFraming:
    def test_newline_delimited(self) -> None:
        sink = MemorySink()
        _logger(sink).info("I'm real")
        assert sink.getvalue().endswith("}\n")

    def test_embedded_newlines_do_not_split_records(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        log.info("line one\nline two\n")
        log.info("%s", "a\r\nb")
        assert len(sink.lines()) == 2

    @pytest.mark.parametrize(
        ("template", "arg", "message"),
        [
            ('"I\'m" %s', '"real"', '"I\'m" "real"'),
            ("I'm\b %s", "real\b", "I'm\b real\b"),
            ("I'm\f %s", "real\f", "I'm\f real\f"),
            ("I'm\n %s", "real\n", "I'm\n real\n"),
            ("I'm\r %s", "real\r", "I'm\r real\r"),
            ("I'm\t %s", "real\t", "I'm\t real\t"),
            ("I'm\\ %s", "real\\", "I'm\\ real\\"),
            ('" \b \f \n \r \t \\ %s', '" \b \f \n \r \t \\', '" \b \f \n \r \t \\ " \b \f \n \r \t \\'),
        ],
    )
    def test_special_characters_round_trip(self, template: str, arg: str, message: str) -> None:
        sink = MemorySink()
        _logger(sink).info(template, arg)
        assert sink.getvalue().count("\n") == 1
        assert json.loads(sink.getvalue()) == {
            "@message": message,
            "@level": "info",
            "@timestamp": TEST_TIME,
        }

    def test_text_sink(self) -> None:
        buf = io.StringIO()
        _logger(buf).info("héllo")
        assert json.loads(buf.getvalue())["@message"] == "héllo"


# ---------------------------------------------------------------------------
# Failure handling
# ---------------------------------------------------------------------------


class TestFailures:
    def test_sink_failure_not_raised(self) -> None:
        sink = FailingSink()
        log = _logger(sink)
        with capture_logs() as logs:
            log.error("lost")
        assert sink.attempts == 1
        assert [e["event"] for e in logs] == ["jlo.sink_write_failed"]

    def test_unserialisable_record_dropped(self) -> None:
        sink = MemorySink()
        log = _logger(sink).with_field("ratio", float("nan"))
        with capture_logs() as logs:
            log.info("m")
        assert sink.writes == []
        assert logs[0]["event"] == "jlo.record_dropped"
        assert logs[0]["code"] == "serialization_error"
        assert logs[0]["detail"] == {"field": "ratio"}

    def test_field_with_broken_str_dropped(self) -> None:
        sink = MemorySink()
        log = _logger(sink).with_field("x", _BrokenStr())
        with capture_logs() as logs:
            log.info("m")
        assert sink.writes == []
        assert logs[0]["event"] == "jlo.record_dropped"
        assert "RuntimeError" in logs[0]["cause"]

    def test_arg_with_broken_str_rendered_inline(self) -> None:
        sink = MemorySink()
        _logger(sink).info("value=%s", _BrokenStr())
        assert _record(sink)["@message"] == "value=%!s(PANIC=RuntimeError: broken __str__)"

    def test_bad_format_args_do_not_raise(self) -> None:
        sink = MemorySink()
        _logger(sink).info("%d", "not a number")
        assert _record(sink)["@message"] == "%!d(str=not a number)"

    def test_set_log_level_rejects_unknown_name(self) -> None:
        from jlo.logging import LevelParseError

        log = _logger(MemorySink())
        with pytest.raises(LevelParseError):
            log.set_log_level("loud")
        assert log.level is LogLevel.INFO


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


def _run_threads(count: int, target: Callable[[int], None]) -> None:
    barrier = threading.Barrier(count)

    def run(i: int) -> None:
        barrier.wait()
        target(i)

    threads = [threading.Thread(target=run, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


class TestConcurrency:
    def test_concurrent_calls_write_whole_lines(self) -> None:
        sink = MemorySink()
        log = _logger(sink)
        long_text = "x" * 4096

        _run_threads(32, lambda i: log.info("%d %s", i, long_text))

        records = sink.records()
        assert len(records) == 32
        assert sorted(int(r["@message"].split()[0]) for r in records) == list(range(32))
        assert len(sink.writes) == 32

    def test_clones_share_write_lock(self) -> None:
        sink = MemorySink()
        root = _logger(sink)

        _run_threads(16, lambda i: root.with_field("worker", i).info("m"))

        assert sorted(r["worker"] for r in sink.records()) == list(range(16))

    def test_level_changes_during_logging(self) -> None:
        sink = MemorySink()
        log = _logger(sink)

        def work(i: int) -> None:
            if i % 2:
                log.set_log_level(LogLevel.DEBUG if i % 4 == 1 else LogLevel.ERROR)
            else:
                log.error("e%d", i)

        _run_threads(20, work)

        assert len(sink.records()) == 10
        assert log.level in (LogLevel.DEBUG, LogLevel.ERROR)

    def test_shared_synchronized_sink_between_loggers(self) -> None:
        sink = MemorySink()
        writer = SynchronizedSink(sink)
        a = Logger(writer, now=FakeClock().now)
        b = Logger(writer, now=FakeClock().now)
        assert a._out is b._out is writer  # noqa: SLF001

        _run_threads(10, lambda i: (a if i % 2 else b).info("m%d", i))

        assert len(sink.records()) == 10


class TestRepr:
    def test_repr(self) -> None:
        r = repr(_logger(MemorySink()).with_field("k", "v"))
        assert "info" in r
        assert "fields=1" in r
