import io

import pytest

from arborlog.core.exceptions import SinkOpenError
from arborlog.core.filters import LevelFilter
from arborlog.core.log_level import LogLevel
from arborlog.core.logger_registry import LoggerRegistry
from arborlog.sinks.file_sink import FileSink
from arborlog.sinks.print_sink import PrintSink


@pytest.fixture
def registry():
    with LoggerRegistry(clock=lambda: 1.5) as reg:
        yield reg


def test_print_sink_plain(registry) -> None:
    stream = io.StringIO()
    sink = PrintSink(with_color=False, stream=stream)
    sink.subscribe("app/net", registry)

    registry.get("app/net").info("start")

    assert stream.getvalue() == "  1.50000 [INFO] start (app/net)\n"


def test_print_sink_colored(registry) -> None:
    stream = io.StringIO()
    sink = PrintSink(stream=stream)
    sink.subscribe("app", registry)

    registry.get("app").error("boom")

    assert stream.getvalue() == "  1.50000 [\033[91mERROR\033[0m] boom (app)\n"


def test_print_sink_applies_filters(registry) -> None:
    stream = io.StringIO()
    sink = PrintSink(with_color=False, stream=stream)
    sink.add_filter(LevelFilter(LogLevel.ERROR))
    sink.subscribe("app", registry)

    registry.get("app").warning("ignored")
    assert stream.getvalue() == ""


def test_file_sink_appends(tmp_path, registry) -> None:
    log_path = tmp_path / "logs" / "app.log"
    log_path.parent.mkdir()
    log_path.write_text("existing\n", encoding="utf-8")

    with FileSink(str(log_path)) as sink:
        sink.subscribe("app", registry)
        registry.get("app").critical("disk full")
        registry.get("app").debug("retrying")

    assert log_path.read_text(encoding="utf-8").splitlines() == [
        "existing",
        "  1.50000000 [CRITICAL] disk full (app)",
        "  1.50000000 [DEBUG] retrying (app)",
    ]
    assert sink.closed


def test_file_sink_creates_parent_directory(tmp_path) -> None:
    sink = FileSink(str(tmp_path / "nested" / "dir" / "out.log"))
    assert sink.path.parent.is_dir()
    sink.close()


def test_file_sink_write_after_close_is_reported(tmp_path, registry) -> None:
    reports = []
    sink = FileSink(str(tmp_path / "out.log"), diagnostic=reports.append)
    sink.subscribe("app", registry)
    sink.close()

    registry.get("app").info("lost")

    assert any("emit failed" in line for line in reports)


def test_file_sink_open_failure(tmp_path) -> None:
    with pytest.raises(SinkOpenError):
        FileSink(str(tmp_path))
