"""Format command - pretty-print a duration given in seconds."""

from collections.abc import Iterator

from ..config.load_config_with_warnings import load_config_with_warnings
from ..StageResult import StageResult
from .._output_schemas.timing import TimingFormatOutput
from .format_duration import format_duration
from .parse_seconds import parse_seconds


def cmd_format(seconds: str, precision: int | None = None) -> StageResult:
    """Format a duration into days, hours, minutes, seconds and a pretty string.

    Args:
        seconds: Duration in seconds, e.g. "10934.1"
        precision: Fractional-second digits; configured precision if None
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, warnings = load_config_with_warnings()
        digits = config.precision if precision is None else precision

        yield (0.5, "Parsing duration...")
        try:
            value = parse_seconds(seconds)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = TimingFormatOutput(
                errors=[str(e)],
                warnings=warnings,
                days=0,
                hours=0,
                minutes=0,
                seconds="",
                elapsed="",
                precision=digits,
                pretty="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        if value < 0:
            warnings.append(f"Negative duration {value} treated as 0")
        if not 0 <= digits <= 9:
            warnings.append(f"Precision {digits} clamped to 0-9")

        yield (0.8, "Formatting...")
        formatted = format_duration(value, digits)

        yield (1.0, "Complete")
        result_obj.result = formatted.report_line()
        result_obj.output = TimingFormatOutput(
            errors=[],
            warnings=warnings,
            days=formatted.days,
            hours=formatted.hours,
            minutes=formatted.minutes,
            seconds=formatted.seconds_text(),
            elapsed=formatted.elapsed_text(),
            precision=formatted.precision,
            pretty=formatted.pretty,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Formatting {seconds} seconds...", progress_callback=do_work)
