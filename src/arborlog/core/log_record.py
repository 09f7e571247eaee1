from dataclasses import dataclass
from typing import Any, Dict

from arborlog.core.log_level import LogLevel

PATH_SEPARATOR = "/"

# Fixed-point widths used by the human-readable backends
CONSOLE_TIME_WIDTH = 9
CONSOLE_TIME_PRECISION = 5
FILE_TIME_WIDTH = 12
FILE_TIME_PRECISION = 8


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable record of a single logging call.

    A record is built once by the emitting logger and handed
    unchanged to every subscribed sink.
    """

    source: str
    # Full path of the emitting logger (e.g. "/app/net").

    timestamp: float
    # Seconds since the process start epoch, not wall-clock time.

    level: LogLevel

    message: str

    @property
    def display_source(self) -> str:
        """Source path without its leading separator."""
        if self.source.startswith(PATH_SEPARATOR):
            return self.source[len(PATH_SEPARATOR):]
        return self.source

    def render(
        self,
        *,
        width: int = CONSOLE_TIME_WIDTH,
        precision: int = CONSOLE_TIME_PRECISION,
        with_color: bool = False,
    ) -> str:
        """
        Human-readable single line:
        <timestamp> [<LEVEL>] <message> (<source>)
        """
        return (
            f"{self.timestamp:{width}.{precision}f} "
            f"[{self.level.label(with_color)}] "
            f"{self.message} "
            f"({self.display_source})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "timestamp": self.timestamp,
            "level": self.level.name,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogRecord":
        return cls(
            source=str(data["source"]),
            timestamp=float(data["timestamp"]),
            level=LogLevel.from_name(str(data["level"])),
            message=str(data["message"]),
        )
