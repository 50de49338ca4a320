"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/timing.py
Stage timer used around scan / resolve / dispose.
"""

import time
from typing import Callable, Optional

from finddupes.utils.convert_utils import ConvertUtils


class LogElapsedTime:
    """
    Context manager that reports how long its block took.

    Usage:
        with LogElapsedTime("  step completed in "):
            scanner.scan()
    """

    def __init__(self, label: str = "", sink: Optional[Callable[[str], None]] = None):
        self.label = label
        self.sink = sink or print
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "LogElapsedTime":
        self.start_time = time.monotonic()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.monotonic() - self.start_time
        # only successful stages are reported
        if exc_type is None:
            self.sink(f"{self.label}{ConvertUtils.seconds_to_human(self.elapsed)}")
        return False
