"""Timing utilities for conversion profiling.

Enabled via the CLAUDE_CHAT_LOG_DEBUG_TIMING environment variable
("1", "true" or "yes"). When disabled the context managers cost nothing.
"""

import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

DEBUG_TIMING = os.getenv("CLAUDE_CHAT_LOG_DEBUG_TIMING", "").lower() in (
    "1",
    "true",
    "yes",
)


@contextmanager
def log_timing(
    phase: Union[str, Callable[[], str]],
    t_start: Optional[float] = None,
) -> Iterator[None]:
    """Context manager for logging phase timing.

    Args:
        phase: Phase name (static string) or callable returning phase name (for dynamic names)
        t_start: Optional start time for calculating total elapsed time

    Example:
        with log_timing(lambda: f"Parse ({len(messages)} messages)", t_start):
            messages = parse_transcript(text)
    """
    if not DEBUG_TIMING:
        yield
        return

    t_phase_start = time.time()
    try:
        yield
    finally:
        t_now = time.time()
        phase_time = t_now - t_phase_start
        phase_name = phase() if callable(phase) else phase

        if t_start is not None:
            total_time = t_now - t_start
            print(
                f"[TIMING] {phase_name:40s} {phase_time:8.3f}s (total: {total_time:8.3f}s)",
                flush=True,
            )
        else:
            print(f"[TIMING] {phase_name:40s} {phase_time:8.3f}s", flush=True)
