import datetime
import logging
import time
from typing import Optional


class ScopedLogger:
    """Logs when a block starts and how long it took, used as `with ScopedLogger("insert 1000 pairs"): ...`"""

    def __init__(self, message: str, logging_level=logging.INFO):
        self.timer = TimedLogger(message=message, logging_level=logging_level)

    def __enter__(self):
        self.timer.begin()
        return self.timer

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.end()


class TimedLogger:
    def __init__(self, message: str, logging_level=logging.INFO):
        self.message = message
        self.logging_level = logging_level
        self.started_at: Optional[int] = None
        self.elapsed: Optional[datetime.timedelta] = None

    def begin(self):
        self.started_at = time.perf_counter_ns()
        logging.log(self.logging_level, f"beginning {self.message}")

    def end(self) -> datetime.timedelta:
        if self.started_at is None:
            raise RuntimeError(f"{self.__class__.__name__} ended before it began: {self.message}")

        self.elapsed = datetime.timedelta(microseconds=(time.perf_counter_ns() - self.started_at) / 1e3)
        logging.log(self.logging_level, f"completed {self.message} in {self.elapsed}")
        return self.elapsed
