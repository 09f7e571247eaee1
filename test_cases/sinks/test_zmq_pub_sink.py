import json
import socket

import pytest
import zmq

from arborlog.core.exceptions import SinkBindError
from arborlog.core.log_level import LogLevel
from arborlog.core.log_record import LogRecord
from arborlog.core.logger_registry import LoggerRegistry
from arborlog.sinks.zmq_pub_sink import ZmqPubSink, decode_frames, encode_frames


class FakeSocket:
    def __init__(self):
        self.bound = []
        self.sent = []
        self.closed = False

    def bind(self, address):
        self.bound.append(address)

    def send_multipart(self, frames):
        self.sent.append(frames)

    def close(self, linger=None):
        self.closed = True


class FakeContext:
    def __init__(self):
        self.sockets = []

    def socket(self, socket_type):
        assert socket_type == zmq.PUB
        sock = FakeSocket()
        self.sockets.append(sock)
        return sock


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def test_frames_are_topic_then_json() -> None:
    record = LogRecord("/app/net", 0.5, LogLevel.INFO, "start")
    topic, payload = encode_frames("telemetry", record)
    assert topic == b"telemetry"
    assert json.loads(payload) == {"source": "/app/net", "timestamp": 0.5, "level": "INFO", "message": "start"}
    assert decode_frames([topic, payload]) == ("telemetry", record)


def test_sink_binds_and_publishes() -> None:
    ctx = FakeContext()
    sink = ZmqPubSink("127.0.0.1", 6100, "log", context=ctx)
    sock = ctx.sockets[0]
    assert sock.bound == ["tcp://127.0.0.1:6100"]
    assert sink.address == "tcp://127.0.0.1:6100"

    with LoggerRegistry(clock=lambda: 2.0) as registry:
        sink.subscribe("app", registry)
        registry.get("app").error("failed")

    (frames,) = sock.sent
    topic, record = decode_frames(frames)
    assert topic == "log"
    assert record == LogRecord("/app", 2.0, LogLevel.ERROR, "failed")

    sink.close()
    assert sock.closed


def test_bind_failure_raises_at_construction() -> None:
    ctx = zmq.Context()
    port = _free_port()
    first = ZmqPubSink("127.0.0.1", port, context=ctx)
    try:
        with pytest.raises(SinkBindError) as exc_info:
            ZmqPubSink("127.0.0.1", port, context=ctx)
        assert exc_info.value.sink_name == "ZmqPubSink"
    finally:
        first.close()
        ctx.term()


def test_sink_closes_on_context_exit() -> None:
    ctx = FakeContext()
    with ZmqPubSink("127.0.0.1", 6101, context=ctx) as sink:
        assert sink.address == "tcp://127.0.0.1:6101"
    assert ctx.sockets[0].closed
