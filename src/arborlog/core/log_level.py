from enum import Enum
from functools import total_ordering


COLOR_RESET = "\033[0m"


@total_ordering
class LogLevel(Enum):
    """
    Ordered severity level for log records.

    ANY is the lowest level and is never produced by a logger method;
    it exists so threshold filters can accept everything.
    """

    ANY = 0         # Matches every record
    DEBUG = 1       # Developer-focused diagnostic information
    INFO = 2        # Normal operation
    WARNING = 3     # Unexpected but recoverable condition
    ERROR = 4       # Operation failed, program continued
    CRITICAL = 5    # Program integrity at risk

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.value < other.value
        return NotImplemented

    @property
    def color_code(self) -> str:
        return LEVEL_COLOR_CODES[self]

    def label(self, with_color: bool = False) -> str:
        """
        Canonical name, optionally wrapped in its terminal color code.
        """
        if with_color:
            return f"{self.color_code}{self.name}{COLOR_RESET}"
        return self.name

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


LEVEL_COLOR_CODES = {
    LogLevel.ANY:      "\033[97m",   # bright white
    LogLevel.DEBUG:    "\033[96m",   # bright cyan
    LogLevel.INFO:     "\033[92m",   # bright green
    LogLevel.WARNING:  "\033[93m",   # bright yellow
    LogLevel.ERROR:    "\033[91m",   # bright red
    LogLevel.CRITICAL: "\033[31m",   # red
}
