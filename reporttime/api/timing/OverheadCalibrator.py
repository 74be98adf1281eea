"""Estimate the fixed cost of taking one clock sample."""

import logging
from decimal import Decimal

from .ClockSampler import ClockSampler

logger = logging.getLogger(__name__)


class OverheadCalibrator:
    """Average per-sample cost of a clock, measured once and cached."""

    def __init__(self, clock: ClockSampler):
        self.clock = clock
        self._overhead: Decimal | None = None

    @property
    def overhead(self) -> Decimal | None:
        return self._overhead

    def calibrate(self, loops: int) -> Decimal:
        """Sample ``loops`` times in a row and return the mean delta.

        The first call does the work; later calls return the cached value until
        :meth:`reset` is called. ``loops`` below 1 counts as 1.
        """
        if self._overhead is not None:
            return self._overhead

        loops = max(int(loops), 1)
        start = self.clock.now()
        stop = start
        for _ in range(loops):
            stop = self.clock.now()
        self._overhead = max((stop - start) / loops, Decimal(0))
        logger.debug("Calibrated clock overhead %ss over %d loops", self._overhead, loops)
        return self._overhead

    def reset(self) -> None:
        self._overhead = None
