"""Output schemas for timing commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class TimingFormatOutput(BaseOutputSchema):
    """Output schema for the format command.

    Numeric fields are strings so the decimals survive yaml/json unchanged.
    """
    days: int = Field(..., description="Whole days")
    hours: int = Field(..., description="Hours within the day (0-23)")
    minutes: int = Field(..., description="Minutes within the hour (0-59)")
    seconds: str = Field(..., description="Seconds within the minute, with precision decimals")
    elapsed: str = Field(..., description="Total seconds, truncated to precision")
    precision: int = Field(..., description="Fractional-second digits used")
    pretty: str = Field(..., description="Pretty-printed duration, empty on error")


class TimingCalibrateOutput(BaseOutputSchema):
    """Output schema for the calibrate command."""
    loops: int = Field(..., description="Number of clock samples taken")
    sampler: str = Field(..., description="'process' for in-process sampling, 'subprocess' for spawned samples")
    overhead: str = Field(..., description="Average seconds per clock sample")


class TimingReportOutput(BaseOutputSchema):
    """Output schema for the report command used by shell hooks."""
    variables: dict[str, str] = Field(..., description="Shell variable name -> value for the finished command")
    report: bool = Field(..., description="Whether the threshold was exceeded")
    report_line: str = Field(..., description="'real <time>s' line, empty if not reported")


register_output_schema("timing", "format", TimingFormatOutput)
register_output_schema("timing", "calibrate", TimingCalibrateOutput)
register_output_schema("timing", "report", TimingReportOutput)
