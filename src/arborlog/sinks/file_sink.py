import threading
from pathlib import Path
from typing import Callable, Optional

from arborlog.core.exceptions import SinkOpenError
from arborlog.core.log_record import FILE_TIME_PRECISION, FILE_TIME_WIDTH, LogRecord
from arborlog.core.sink import Sink


class FileSink(Sink):
    """
    Log sink that appends records to a text file, one line each.

    The file is opened in append mode at construction, so existing
    content is preserved across runs.
    """

    def __init__(self, file_path: str, *, diagnostic: Optional[Callable[[str], None]] = None):
        super().__init__(diagnostic=diagnostic)
        self._path = Path(file_path)
        self._lock = threading.Lock()

        try:
            # Ensure parent directory exists
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self._path, "a", encoding="utf-8")
        except OSError as e:
            raise SinkOpenError(self.name, f"cannot open {self._path}", details=str(e)) from e

        self._log(f"[{self.name}] Appending to {self._path}")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def emit(self, record: LogRecord) -> None:
        line = record.render(width=FILE_TIME_WIDTH, precision=FILE_TIME_PRECISION)
        with self._lock:
            self._file.write(line + "\n")
            self._file.flush()

    def close(self) -> None:
        """
        Close the underlying file handle.
        """
        with self._lock:
            if not self._file.closed:
                self._file.close()
                self._log(f"[{self.name}] Closed {self._path}")

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
