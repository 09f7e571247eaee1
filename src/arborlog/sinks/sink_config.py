"""
Module: sink_config.py
Location: src/arborlog/sinks/

Declarative sink configuration and the factory that turns it into
live sinks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from arborlog.core.exceptions import SinkConfigError
from arborlog.core.filters import LevelFilter
from arborlog.core.log_level import LogLevel
from arborlog.core.sink import Sink
from arborlog.sinks.file_sink import FileSink
from arborlog.sinks.print_sink import PrintSink
from arborlog.sinks.zmq_pub_sink import ZmqPubSink, build_address

DEFAULT_ZMQ_HOST = "localhost"
DEFAULT_ZMQ_PORT = 5556
DEFAULT_ZMQ_TOPIC = "log"


@dataclass(frozen=True)
class PrintSinkConfig:
    with_color: bool = True
    min_level: Optional[LogLevel] = None


@dataclass(frozen=True)
class FileSinkConfig:
    path: str
    min_level: Optional[LogLevel] = None


@dataclass(frozen=True)
class ZmqPubSinkConfig:
    host: str = DEFAULT_ZMQ_HOST
    port: int = DEFAULT_ZMQ_PORT
    topic: str = DEFAULT_ZMQ_TOPIC
    min_level: Optional[LogLevel] = None

    @property
    def address(self) -> str:
        return build_address(self.host, self.port)


SinkConfig = Union[PrintSinkConfig, FileSinkConfig, ZmqPubSinkConfig]


def _parse_level(value: Any) -> Optional[LogLevel]:
    if value is None or isinstance(value, LogLevel):
        return value
    try:
        return LogLevel.from_name(str(value))
    except ValueError as e:
        raise SinkConfigError(str(e)) from e


def sink_config_from_dict(data: Dict[str, Any]) -> SinkConfig:
    """
    Build a sink configuration from a plain dict (e.g. parsed JSON),
    selected by its "type" key: "print", "file" or "zmq".
    """
    sink_type = data.get("type")
    min_level = _parse_level(data.get("min_level"))

    if sink_type == "print":
        return PrintSinkConfig(
            with_color=bool(data.get("with_color", True)),
            min_level=min_level,
        )

    if sink_type == "file":
        if "path" not in data:
            raise SinkConfigError("file sink requires 'path'")
        return FileSinkConfig(path=str(data["path"]), min_level=min_level)

    if sink_type == "zmq":
        try:
            port = int(data.get("port", DEFAULT_ZMQ_PORT))
        except (TypeError, ValueError):
            raise SinkConfigError(f"invalid port: {data.get('port')!r}") from None
        return ZmqPubSinkConfig(
            host=str(data.get("host", DEFAULT_ZMQ_HOST)),
            port=port,
            topic=str(data.get("topic", DEFAULT_ZMQ_TOPIC)),
            min_level=min_level,
        )

    raise SinkConfigError(f"Unknown sink type: {sink_type!r}")


def create_sink(
    config: SinkConfig,
    *,
    diagnostic: Optional[Callable[[str], None]] = None,
) -> Sink:
    """
    Instantiate the sink described by config. The caller owns the
    returned sink and must keep it alive for as long as it should
    receive records.
    """
    if isinstance(config, PrintSinkConfig):
        sink: Sink = PrintSink(config.with_color, diagnostic=diagnostic)
    elif isinstance(config, FileSinkConfig):
        sink = FileSink(config.path, diagnostic=diagnostic)
    elif isinstance(config, ZmqPubSinkConfig):
        sink = ZmqPubSink(config.host, config.port, config.topic, diagnostic=diagnostic)
    else:
        raise SinkConfigError(f"Unsupported sink config: {config!r}")

    if config.min_level is not None:
        sink.add_filter(LevelFilter(config.min_level))
    return sink
