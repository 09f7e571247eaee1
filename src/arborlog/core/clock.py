"""
Module: clock.py
Location: src/arborlog/core/

Process-wide monotonic clock. The epoch is captured once, when this
module is first imported, and every timestamp is expressed as float
seconds elapsed since then.
"""

import time

PROCESS_START = time.perf_counter()


def elapsed() -> float:
    return time.perf_counter() - PROCESS_START
