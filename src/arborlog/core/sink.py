"""
Module: sink.py
Location: src/arborlog/core/

Base class for log sinks and the non-owning reference logger nodes
keep to them.

Sinks are owned by whoever created them. The logger tree only holds
SinkRef objects, so subscribing never extends a sink's lifetime and a
destroyed sink is simply pruned on the next publish.
"""

from __future__ import annotations

import itertools
import weakref
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from arborlog.core.filters import Filter, FilterChain
from arborlog.core.log_record import LogRecord
from arborlog.core.logger_node import LoggerNode
from arborlog.core.logger_registry import LoggerRegistry, default_registry

_sink_tokens = itertools.count(1)


class SinkRef:
    """
    Observer handle for a sink: a unique token plus a weak reference.

    Two refs are equal when they carry the same token, whether or not
    the sink is still alive.
    """

    __slots__ = ("token", "_ref")

    def __init__(self, sink: "Sink"):
        self.token = sink.token
        self._ref = weakref.ref(sink)

    def resolve(self) -> Optional["Sink"]:
        return self._ref()

    @property
    def alive(self) -> bool:
        return self._ref() is not None

    def __eq__(self, other):
        if not isinstance(other, SinkRef):
            return NotImplemented
        return self.token == other.token

    def __hash__(self):
        return hash(self.token)

    def __repr__(self) -> str:
        return f"SinkRef(token={self.token}, alive={self.alive})"


class Sink(ABC):
    """
    Abstract destination for log records.

    handle() applies the sink's filter chain and only then calls the
    backend-specific emit(). Exceptions raised by emit() are reported
    to the diagnostic callback and never reach the logger.
    """

    def __init__(self, *, diagnostic: Optional[Callable[[str], None]] = None):
        self.token = next(_sink_tokens)
        self.filters = FilterChain()
        self._log = diagnostic or (lambda s: None)
        self._ref = SinkRef(self)

    @property
    def name(self) -> str:
        return type(self).__name__

    def ref(self) -> SinkRef:
        return self._ref

    # --------------------------
    # Filtering
    # --------------------------

    def add_filter(self, f: Filter) -> None:
        self.filters.add_filter(f)

    def remove_filter(self, f: Filter) -> None:
        self.filters.remove_filter(f)

    def clear_filters(self) -> None:
        self.filters.clear_filters()

    # --------------------------
    # Record handling
    # --------------------------

    def handle(self, record: LogRecord) -> None:
        try:
            accepted = self.filters.filter(record)
        except Exception as e:
            self._log(f"[{self.name}] filter failed: {e!r}")
            return
        if not accepted:
            return
        try:
            self.emit(record)
        except Exception as e:
            self._log(f"[{self.name}] emit failed: {e!r}")

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """
        Write an accepted record to the backend.
        """

    # --------------------------
    # Subscription
    # --------------------------

    def subscribe(
        self,
        target: Union[LoggerNode, str],
        registry: Optional[LoggerRegistry] = None,
    ) -> LoggerNode:
        """
        Subscribe to a logger and every logger currently below it.

        target is a node or a path; paths are resolved through the
        given registry, or the process default registry.
        """
        node = _resolve_target(target, registry)
        node.attach_sink(self._ref)
        return node

    def unsubscribe(
        self,
        target: Union[LoggerNode, str],
        registry: Optional[LoggerRegistry] = None,
    ) -> LoggerNode:
        node = _resolve_target(target, registry)
        node.detach_sink(self._ref)
        return node


def _resolve_target(target: Union[LoggerNode, str], registry: Optional[LoggerRegistry]) -> LoggerNode:
    if isinstance(target, LoggerNode):
        return target
    return (registry or default_registry()).get(target)
