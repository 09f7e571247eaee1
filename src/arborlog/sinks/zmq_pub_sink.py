"""
Module: zmq_pub_sink.py
Location: src/arborlog/sinks/

Publishes log records on a ZeroMQ PUB socket.

Each record goes out as a two-frame multipart message:
    [topic, JSON-encoded record]
so subscribers can filter by topic with SUBSCRIBE.
"""

import json
import threading
from typing import Callable, List, Optional

import zmq

from arborlog.core.exceptions import SinkBindError
from arborlog.core.log_record import LogRecord
from arborlog.core.sink import Sink


def build_address(host: str, port: int) -> str:
    return f"tcp://{host}:{port}"


def encode_frames(topic: str, record: LogRecord) -> List[bytes]:
    return [
        topic.encode("utf-8"),
        json.dumps(record.to_dict()).encode("utf-8"),
    ]


def decode_frames(frames: List[bytes]) -> tuple[str, LogRecord]:
    topic, payload = frames[0], frames[-1]
    return topic.decode("utf-8"), LogRecord.from_dict(json.loads(payload.decode("utf-8")))


class ZmqPubSink(Sink):
    """
    Log sink bound to tcp://<host>:<port> as a ZMQ publisher.

    The socket is bound at construction; a bind failure raises
    SinkBindError immediately rather than during logging.
    """

    def __init__(
        self,
        host: str,
        port: int,
        topic: str = "log",
        *,
        context: Optional[zmq.Context] = None,
        diagnostic: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(diagnostic=diagnostic)
        self.topic = topic
        self.address = build_address(host, port)
        self._lock = threading.Lock()

        self._ctx = context or zmq.Context.instance()
        self._socket = self._ctx.socket(zmq.PUB)
        try:
            self._socket.bind(self.address)
        except zmq.ZMQError as e:
            self._socket.close(linger=0)
            raise SinkBindError(self.name, f"cannot bind {self.address}", details=str(e)) from e

        self._log(f"[{self.name}] Publishing topic '{self.topic}' on {self.address}")

    def emit(self, record: LogRecord) -> None:
        frames = encode_frames(self.topic, record)
        with self._lock:
            self._socket.send_multipart(frames)

    def close(self, linger: int = 0) -> None:
        with self._lock:
            if not self._socket.closed:
                self._socket.close(linger=linger)
                self._log(f"[{self.name}] Closed {self.address}")

    def __enter__(self) -> "ZmqPubSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
