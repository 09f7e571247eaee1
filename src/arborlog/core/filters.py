from typing import Callable, List, Protocol

from arborlog.core.log_level import LogLevel
from arborlog.core.log_record import LogRecord


class Filter(Protocol):
    """
    Accept/reject predicate applied by a sink before it writes a record.

    The same filter object may be attached to several chains.
    """

    def filter(self, record: LogRecord) -> bool:
        """Return True to accept the record."""


class FilterChain:
    """
    Ordered AND-combination of filters.

    An empty chain accepts every record.
    """

    def __init__(self):
        self._filters: List[Filter] = []

    def add_filter(self, f: Filter) -> None:
        self._filters.append(f)

    def remove_filter(self, f: Filter) -> None:
        """Remove every entry that is this exact filter object."""
        self._filters = [existing for existing in self._filters if existing is not f]

    def clear_filters(self) -> None:
        self._filters.clear()

    @property
    def filters(self) -> List[Filter]:
        return list(self._filters)

    def filter(self, record: LogRecord) -> bool:
        for f in self._filters:
            if not f.filter(record):
                return False
        return True

    def __len__(self) -> int:
        return len(self._filters)


class LevelFilter:
    """Accepts records at or above a severity threshold."""

    def __init__(self, threshold: LogLevel):
        self.threshold = threshold

    def filter(self, record: LogRecord) -> bool:
        return record.level >= self.threshold


class SourceFilter:
    """
    Accepts records whose source path lies under a logger path.

    The prefix is matched on whole segments, so "/app" matches
    "/app" and "/app/net" but not "/application".
    """

    def __init__(self, prefix: str):
        stripped = prefix.strip("/")
        self.prefix = "/" + stripped if stripped else ""

    def filter(self, record: LogRecord) -> bool:
        if record.source == self.prefix:
            return True
        return record.source.startswith(self.prefix + "/")


class FunctionFilter:
    """Adapts a plain callable to the Filter protocol."""

    def __init__(self, fn: Callable[[LogRecord], bool]):
        self._fn = fn

    def filter(self, record: LogRecord) -> bool:
        return bool(self._fn(record))
