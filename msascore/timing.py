"""Wall-clock timing for CLI stages."""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional


@contextmanager
def time_it(
    title: str = "",
    logger: Optional[logging.Logger] = None,
    run: bool = True,
) -> Iterator[None]:
    """Report how long the wrapped block took.

    The message goes to *logger* at INFO, or to stderr without one.
    With ``run=False`` the block runs untimed.
    """
    if not run:
        yield
        return

    start = time.perf_counter()
    yield
    elapsed = time.perf_counter() - start

    if title:
        msg = f"{title} finished in {elapsed:.4f} seconds"
    else:
        msg = f"Finished in {elapsed:.4f} seconds"

    if logger is not None:
        logger.info(msg)
    else:
        print(msg, file=sys.stderr)
