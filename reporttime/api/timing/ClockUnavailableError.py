"""Raised when no usable wall-clock source exists."""


class ClockUnavailableError(RuntimeError):
    """The time source failed; timing cannot work in this process."""
