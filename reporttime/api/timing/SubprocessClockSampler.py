"""Clock sampler that pays the same process-spawn cost as the shell hooks."""

import subprocess
import sys
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from .ClockSampler import ClockSampler
from .ClockUnavailableError import ClockUnavailableError


class SubprocessClockSampler(ClockSampler):
    """Take each sample by running ``reporttime now`` in a child process.

    Shell hosts spawn a process for every timestamp, so calibrating with this
    sampler measures the overhead those hosts actually see.
    """

    def __init__(self, command: Sequence[str] | None = None):
        self._command = list(command) if command else [sys.executable, "-m", "reporttime", "now"]
        super().__init__(source=self._sample_ns)

    def _sample_ns(self) -> int:
        try:
            out = subprocess.run(self._command, capture_output=True, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ClockUnavailableError(f"Failed to run {' '.join(self._command)}: {e}") from e
        try:
            return int(Decimal(out.stdout.strip()).scaleb(9))
        except InvalidOperation as e:
            raise ClockUnavailableError(f"Unexpected timestamp output: {out.stdout!r}") from e
