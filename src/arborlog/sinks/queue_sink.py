import queue
from typing import Callable, Optional

from arborlog.core.log_record import LogRecord
from arborlog.core.sink import Sink


class QueueSink(Sink):
    """
    Log sink that forwards accepted records to a thread-safe queue.

    This sink performs no I/O and is safe to use from any thread;
    a consumer (viewer, test, worker) drains the queue.
    """

    def __init__(
        self,
        record_queue: Optional[queue.Queue] = None,
        *,
        diagnostic: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(diagnostic=diagnostic)
        self.queue = record_queue if record_queue is not None else queue.Queue()

    def emit(self, record: LogRecord) -> None:
        """
        Forward a record to the queue. Never blocks; a full queue
        raises queue.Full, which handle() reports and drops.
        """
        self.queue.put_nowait(record)

    def drain(self) -> list[LogRecord]:
        records = []
        while True:
            try:
                records.append(self.queue.get_nowait())
            except queue.Empty:
                return records
