"""
Timing utilities.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator


@contextmanager
def timer() -> Iterator[Dict[str, float]]:
    """
    Measure wall-clock time of a block in milliseconds.

    The elapsed time is written into the yielded dict when the block
    exits, so read it after the ``with`` statement.

    Example:
        >>> with timer() as t:
        ...     resize(image, 64, 64)
        >>> t["ms"]
    """
    result = {"ms": 0.0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = (time.perf_counter() - start) * 1000.0
