from arborlog.core.log_level import COLOR_RESET, LogLevel
from arborlog.core.log_record import LogRecord


def test_levels_are_ordered() -> None:
    assert LogLevel.ANY < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR < LogLevel.CRITICAL
    assert LogLevel.ERROR >= LogLevel.WARNING
    assert not LogLevel.INFO > LogLevel.INFO


def test_level_label_with_color() -> None:
    assert LogLevel.INFO.label() == "INFO"
    assert LogLevel.INFO.label(with_color=True) == "\033[92mINFO" + COLOR_RESET
    assert LogLevel.CRITICAL.label(with_color=True).startswith("\033[31m")


def test_level_from_name_is_case_insensitive() -> None:
    assert LogLevel.from_name("warning") is LogLevel.WARNING


def test_render_strips_leading_separator() -> None:
    record = LogRecord("/app/net", 1.5, LogLevel.WARNING, "slow response")
    assert record.render() == "  1.50000 [WARNING] slow response (app/net)"


def test_render_file_width() -> None:
    record = LogRecord("/db", 0.25, LogLevel.ERROR, "lost connection")
    assert record.render(width=12, precision=8) == "  0.25000000 [ERROR] lost connection (db)"


def test_record_dict_shape() -> None:
    record = LogRecord("/app", 2.0, LogLevel.DEBUG, "hello")
    assert record.to_dict() == {"source": "/app", "timestamp": 2.0, "level": "DEBUG", "message": "hello"}
    assert LogRecord.from_dict(record.to_dict()) == record
