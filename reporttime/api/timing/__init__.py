"""Timing core: clock sampling, overhead calibration, duration formatting."""

from .ClockSampler import ClockSampler
from .ClockUnavailableError import ClockUnavailableError
from .CommandTimer import CommandTimer
from .format_duration import format_duration
from .FormattedDuration import FormattedDuration
from .Measurement import TIMING_DISABLED, Measurement
from .OverheadCalibrator import OverheadCalibrator
from .SubprocessClockSampler import SubprocessClockSampler

__all__ = [
    "TIMING_DISABLED",
    "ClockSampler",
    "ClockUnavailableError",
    "CommandTimer",
    "FormattedDuration",
    "Measurement",
    "OverheadCalibrator",
    "SubprocessClockSampler",
    "format_duration",
]
