"""High-resolution wall-clock sampler."""

import time
from collections.abc import Callable
from decimal import Decimal

from .ClockUnavailableError import ClockUnavailableError


class ClockSampler:
    """Wall-clock timestamps as exact decimal seconds with nanosecond granularity.

    Decimal keeps every nanosecond of ``time.time_ns()``; a float would lose the
    low digits at current epoch magnitudes. Timestamps therefore survive being
    passed between processes as text, the way ``date +%s.%N`` output does.
    """

    def __init__(self, source: Callable[[], int] = time.time_ns):
        self._source = source
        try:
            source()
        except (OSError, RuntimeError, AttributeError) as e:
            raise ClockUnavailableError(f"Clock source unavailable: {e}") from e

    def now(self) -> Decimal:
        return Decimal(self._source()).scaleb(-9)

    def now_text(self) -> str:
        return format(self.now(), ".9f")
