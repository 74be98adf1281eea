"""Report command - finish timing a command on behalf of a shell hook."""

from collections.abc import Iterator
from decimal import Decimal

from pydantic import ValidationError

from ..config.load_config_with_warnings import load_config_with_warnings
from ..config.ReportTimeConfig import ReportTimeConfig
from ..StageResult import StageResult
from .._output_schemas.timing import TimingReportOutput
from .CommandTimer import CommandTimer
from .Measurement import TIMING_DISABLED
from .parse_seconds import parse_seconds


def cmd_report(
    start: str,
    stop: str,
    overhead: str = "0",
    threshold: str | None = None,
    precision: int | None = None,
) -> StageResult:
    """Compute the elapsed time between two timestamps and decide on a report.

    Shell hosts keep the start timestamp and calibrated overhead in shell
    variables and pass them in; the result is handed back as variables.

    Args:
        start: Start timestamp in seconds; "0" means timing was disabled
        stop: Stop timestamp in seconds
        overhead: Calibrated per-sample overhead in seconds
        threshold: Overrides the configured threshold ("no" never reports)
        precision: Overrides the configured precision
    """

    def _failure(result_obj: StageResult, message: str, warnings: list[str]) -> None:
        result_obj.result = message
        result_obj.output = TimingReportOutput(
            errors=[message],
            warnings=warnings,
            variables={},
            report=False,
            report_line="",
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, warnings = load_config_with_warnings()
        overrides = {}
        if threshold is not None and threshold.strip():
            overrides["threshold"] = threshold
        if precision is not None:
            overrides["precision"] = precision
        try:
            config = ReportTimeConfig(**{**config.to_dict(), **overrides})
        except ValidationError as e:
            yield (1.0, "Complete")
            _failure(result_obj, f"Invalid override: {e.errors()[0].get('msg', e)}", warnings)
            return

        yield (0.5, "Parsing timestamps...")
        try:
            start_ts = parse_seconds(start)
            stop_ts = parse_seconds(stop)
            overhead_ts = parse_seconds(overhead) if overhead.strip() else Decimal(0)
        except ValueError as e:
            yield (1.0, "Complete")
            _failure(result_obj, str(e), warnings)
            return

        if start_ts == TIMING_DISABLED:
            yield (1.0, "Complete")
            result_obj.result = "Timing disabled for this command"
            result_obj.output = TimingReportOutput(
                errors=[],
                warnings=warnings,
                variables={},
                report=False,
                report_line="",
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.8, "Measuring...")
        timer = CommandTimer(config, overhead=overhead_ts)
        formatted = timer.measure(start_ts, stop_ts)
        report = config.should_report(formatted.elapsed)

        yield (1.0, "Complete")
        result_obj.result = formatted.report_line()
        result_obj.output = TimingReportOutput(
            errors=[],
            warnings=warnings,
            variables=formatted.variables(),
            report=report,
            report_line=formatted.report_line() if report else "",
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Measuring command time...", progress_callback=do_work)
