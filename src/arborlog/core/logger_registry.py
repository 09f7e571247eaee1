from __future__ import annotations

import threading
from typing import Callable, Iterator, Optional

from arborlog.core.clock import elapsed
from arborlog.core.logger_node import LoggerNode


class LoggerRegistry:
    """
    Owner of a logger tree.

    The registry holds the root node and is the entry point for
    obtaining loggers by path. Every node in the tree shares the
    registry's lock and clock.
    """

    def __init__(self, *, clock: Optional[Callable[[], float]] = None):
        self._lock = threading.RLock()
        self._clock = clock or elapsed
        self._root: Optional[LoggerNode] = LoggerNode(None, "", lock=self._lock, clock=self._clock)

    @property
    def root(self) -> LoggerNode:
        if self._root is None:
            raise RuntimeError("LoggerRegistry has been closed")
        return self._root

    @property
    def closed(self) -> bool:
        return self._root is None

    def get(self, path: str) -> LoggerNode:
        """
        Return the logger at path, creating missing ancestors.

        Calling get() twice with the same path returns the same node.
        """
        return self.root.get(path)

    def walk(self) -> Iterator[LoggerNode]:
        return self.root.walk()

    def close(self) -> None:
        """
        Tear down the tree. Handles obtained earlier keep working as
        detached nodes but are no longer reachable from the registry.
        """
        with self._lock:
            self._root = None

    def __enter__(self) -> LoggerRegistry:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> LoggerRegistry:
    """
    Process-wide registry, created on first use.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None or _default_registry.closed:
            _default_registry = LoggerRegistry()
        return _default_registry


def reset_default_registry() -> None:
    global _default_registry
    with _default_lock:
        if _default_registry is not None:
            _default_registry.close()
        _default_registry = None


def get_logger(path: str) -> LoggerNode:
    return default_registry().get(path)
