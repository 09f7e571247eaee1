import sys
from typing import Callable, Optional, TextIO

from arborlog.core.log_record import CONSOLE_TIME_PRECISION, CONSOLE_TIME_WIDTH, LogRecord
from arborlog.core.sink import Sink


class PrintSink(Sink):
    """
    Log sink that writes one human-readable line per record to a
    text stream (stdout by default), optionally coloring the level.
    """

    def __init__(
        self,
        with_color: bool = True,
        *,
        stream: Optional[TextIO] = None,
        diagnostic: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(diagnostic=diagnostic)
        self.with_color = with_color
        self._stream = stream

    def emit(self, record: LogRecord) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        line = record.render(
            width=CONSOLE_TIME_WIDTH,
            precision=CONSOLE_TIME_PRECISION,
            with_color=self.with_color,
        )
        print(line, file=stream, flush=True)
