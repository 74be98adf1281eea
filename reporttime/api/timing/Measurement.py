"""Start/stop timestamps of one command."""

from dataclasses import dataclass
from decimal import Decimal

# Start timestamp meaning "timing disabled for this command"
TIMING_DISABLED = Decimal(0)


@dataclass(frozen=True)
class Measurement:
    """Raw timestamps of one command and the overhead to subtract from them."""

    start: Decimal
    stop: Decimal
    overhead: Decimal = Decimal(0)

    @property
    def raw_elapsed(self) -> Decimal:
        return self.stop - self.start - self.overhead

    @property
    def elapsed(self) -> Decimal:
        """Elapsed seconds, clamped at zero when the overhead exceeds the run time."""
        return max(self.raw_elapsed, Decimal(0))
