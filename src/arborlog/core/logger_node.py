"""
Module: logger_node.py
Location: src/arborlog/core/

A named point in the logger tree. Nodes own their children, hold
non-owning references to subscribed sinks, and broadcast records
to those sinks on the caller's thread.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Dict, Iterator, List, Optional

from arborlog.core.clock import elapsed
from arborlog.core.log_level import LogLevel
from arborlog.core.log_record import PATH_SEPARATOR, LogRecord

if TYPE_CHECKING:
    from arborlog.core.sink import SinkRef


class LoggerNode:
    """
    Tree node holding a name, its full path, a back-reference to its
    parent, the children it owns, and weak sink subscriptions.

    Children are created lazily by get() and never removed.

    Broadcast targets this node's own sinks only. The parent reference
    and the propagate flag are kept on the node but are not consulted
    when publishing.
    """

    def __init__(
        self,
        parent: Optional[LoggerNode],
        name: str,
        propagate: bool = True,
        *,
        lock: Optional[threading.RLock] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.parent = parent
        self.name = name
        self.propagate = propagate
        self.path = "" if parent is None else parent.path + PATH_SEPARATOR + name

        # Children share the tree-wide lock and clock of their root
        self._lock = lock or (parent._lock if parent is not None else threading.RLock())
        self._clock = clock or (parent._clock if parent is not None else elapsed)

        self._children: Dict[str, LoggerNode] = {}
        self._sinks: List[SinkRef] = []

    # --------------------------
    # Tree structure
    # --------------------------

    @property
    def children(self) -> Dict[str, LoggerNode]:
        with self._lock:
            return dict(self._children)

    @property
    def sinks(self) -> List[SinkRef]:
        with self._lock:
            return list(self._sinks)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def ensure_child(self, name: str) -> LoggerNode:
        with self._lock:
            child = self._children.get(name)
            if child is None:
                child = LoggerNode(self, name, propagate=True)
                self._children[name] = child
            return child

    def get(self, path: str) -> LoggerNode:
        """
        Return the descendant at a relative path, creating every
        missing node along the way.

        Empty segments are legal and name a child "".
        """
        head, sep, tail = path.partition(PATH_SEPARATOR)
        child = self.ensure_child(head)
        if not sep:
            return child
        return child.get(tail)

    def walk(self) -> Iterator[LoggerNode]:
        """Depth-first iteration over this node and its descendants."""
        yield self
        for child in self.children.values():
            yield from child.walk()

    # --------------------------
    # Sink subscription
    # --------------------------

    def attach_sink(self, ref: SinkRef) -> None:
        """
        Subscribe a sink here and in every current descendant.

        Descendants created later do not inherit the subscription.
        """
        with self._lock:
            self._sinks.append(ref)
            children = list(self._children.values())
        for child in children:
            child.attach_sink(ref)

    def detach_sink(self, ref: SinkRef) -> None:
        """
        Remove every reference to the same sink here and in every
        current descendant. References are compared by sink token,
        so dead references are removed too.
        """
        with self._lock:
            self._sinks = [existing for existing in self._sinks if existing != ref]
            children = list(self._children.values())
        for child in children:
            child.detach_sink(ref)

    # --------------------------
    # Logging
    # --------------------------

    def publish(self, record: LogRecord) -> None:
        """
        Deliver a record to every live sink subscribed to this node.

        References whose sink no longer exists are pruned.
        """
        with self._lock:
            live = []
            kept = []
            for ref in self._sinks:
                sink = ref.resolve()
                if sink is None:
                    continue
                kept.append(ref)
                live.append(sink)
            self._sinks = kept

        for sink in live:
            try:
                sink.handle(record)
            except Exception:
                # A sink must never stop delivery to the others.
                pass

    def log(self, level: LogLevel, message: str) -> None:
        self.publish(LogRecord(self.path, self._clock(), level, message))

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.log(LogLevel.ERROR, message)

    def critical(self, message: str) -> None:
        self.log(LogLevel.CRITICAL, message)

    def __repr__(self) -> str:
        return f"LoggerNode(path={self.path!r}, children={len(self._children)}, sinks={len(self._sinks)})"
