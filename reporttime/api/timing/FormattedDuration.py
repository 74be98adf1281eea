"""Formatted elapsed time of one command."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class FormattedDuration(BaseModel):
    """Elapsed time split into units, plus the pretty-printed form.

    ``pretty`` looks like ``Xdays, HH:MM:SS.ddd`` with insignificant leading
    units left out, e.g. ``3:02:14.100``.
    """

    model_config = ConfigDict(frozen=True)

    days: int = Field(..., ge=0)
    hours: int = Field(..., ge=0, le=23)
    minutes: int = Field(..., ge=0, le=59)
    seconds: Decimal = Field(..., ge=0, lt=60, description="Seconds including the fractional digits")
    elapsed: Decimal = Field(..., ge=0, description="Total seconds, truncated to precision")
    precision: int = Field(..., ge=0, le=9)
    pretty: str

    def seconds_text(self) -> str:
        return format(self.seconds, f".{self.precision}f")

    def elapsed_text(self) -> str:
        return format(self.elapsed, f".{self.precision}f")

    def total_seconds(self) -> Decimal:
        return self.days * 86400 + self.hours * 3600 + self.minutes * 60 + self.seconds

    def report_line(self) -> str:
        return f"real {self.pretty}s"

    def variables(self) -> dict[str, str]:
        """Values exposed to prompt renderers, keyed by their shell variable names."""
        return {
            "rtdays": str(self.days),
            "rthours": str(self.hours),
            "rtmins": str(self.minutes),
            "rtsecs": self.seconds_text(),
            "rttime": self.pretty,
            "reporttime_exec_time": self.elapsed_text(),
        }
