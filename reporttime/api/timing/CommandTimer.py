"""Times interactively entered commands and reports the slow ones."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import TextIO

from ...utils.logger import configure_logging
from ..config.load_config_with_warnings import load_config_with_warnings
from ..config.ReportTimeConfig import ReportTimeConfig
from .ClockSampler import ClockSampler
from .format_duration import format_duration
from .FormattedDuration import FormattedDuration
from .Measurement import TIMING_DISABLED, Measurement
from .OverheadCalibrator import OverheadCalibrator

logger = logging.getLogger(__name__)


class CommandTimer:
    """Before/after command hooks around a calibrated clock.

    A host calls :meth:`before_command` right before it runs a user command and
    :meth:`after_command` right after, before drawing the next prompt. The
    timer is IDLE between the two calls and RUNNING inside them.

    Initialization order is configuration, then calibration, then ready. The
    last measurement outlives the command that produced it so the bypass
    command and prompt renderers can read it later.
    """

    def __init__(
        self,
        config: ReportTimeConfig,
        clock: ClockSampler | None = None,
        overhead: Decimal | None = None,
        stream: TextIO | None = None,
    ):
        self.config = config
        self.clock = clock or ClockSampler()
        self.calibrator = OverheadCalibrator(self.clock)
        if overhead is None:
            overhead = self.calibrator.calibrate(config.calibration_loops)
        self.overhead = overhead
        self.stream = stream
        self.start: Decimal = TIMING_DISABLED
        self.last: FormattedDuration | None = None
        self.in_internal_evaluation = False

    @classmethod
    def from_environment(cls, stream: TextIO | None = None) -> "CommandTimer":
        """Build a timer from config.json and the REPORTTIME* variables.

        Unusable settings fall back to the defaults and are logged as warnings.
        """
        config, warnings = load_config_with_warnings()
        configure_logging(level=config.log_level)
        for warning in warnings:
            logger.warning(warning)
        return cls(config, stream=stream)

    @property
    def running(self) -> bool:
        return self.start != TIMING_DISABLED

    @contextmanager
    def internal_evaluation(self) -> Iterator[None]:
        """Suspend timing while the host evaluates commands of its own."""
        previous = self.in_internal_evaluation
        self.in_internal_evaluation = True
        try:
            yield
        finally:
            self.in_internal_evaluation = previous

    def before_command(self, command_line: str) -> None:
        if self.in_internal_evaluation:
            return
        if command_line.strip() == self.config.bypass_command:
            self.start = TIMING_DISABLED
        else:
            self.start = self.clock.now()

    def after_command(self) -> FormattedDuration | None:
        """Finish timing the current command and report it if it was slow.

        Returns the new measurement, or None when nothing was timed. A failure
        while measuring is logged and the timer goes back to IDLE.
        """
        stop = self.clock.now()
        if self.in_internal_evaluation:
            return None
        start, self.start = self.start, TIMING_DISABLED
        if start == TIMING_DISABLED:
            return None

        try:
            formatted = self.measure(start, stop)
            if self.config.should_report(formatted.elapsed):
                self.report()
        except Exception:
            logger.exception("Failed to time command started at %s", start)
            return None
        return formatted

    def measure(self, start: Decimal, stop: Decimal) -> FormattedDuration:
        """Compute and store the formatted duration between two timestamps."""
        measurement = Measurement(start=start, stop=stop, overhead=self.overhead)
        if measurement.raw_elapsed < 0:
            logger.debug("Negative elapsed time %ss clamped to zero", measurement.raw_elapsed)
        self.last = format_duration(measurement.elapsed, self.config.precision)
        return self.last

    def report(self) -> str | None:
        """Write ``real <pretty>s`` for the last measurement, if there is one."""
        if self.last is None:
            return None
        line = self.last.report_line()
        print(line, file=self.stream or sys.stdout)
        return line

    def show_last(self) -> str | None:
        """The bypass command: repeat the last report without timing anything."""
        return self.report()

    def variables(self) -> dict[str, str]:
        return self.last.variables() if self.last is not None else {}
