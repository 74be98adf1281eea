"""Calibrate command - measure the cost of one clock sample."""

from collections.abc import Iterator

from ..config.load_config_with_warnings import load_config_with_warnings
from ..StageResult import StageResult
from .._output_schemas.timing import TimingCalibrateOutput
from .ClockSampler import ClockSampler
from .ClockUnavailableError import ClockUnavailableError
from .OverheadCalibrator import OverheadCalibrator
from .SubprocessClockSampler import SubprocessClockSampler


def cmd_calibrate(loops: int | None = None, spawn: bool = False) -> StageResult:
    """Estimate clock sampling overhead.

    Args:
        loops: Number of samples; configured calibration_loops if None
        spawn: Sample by spawning ``reporttime now`` like the shell hooks do
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config, warnings = load_config_with_warnings()
        count = config.calibration_loops if loops is None else max(loops, 1)
        sampler_name = "subprocess" if spawn else "process"

        yield (0.4, f"Sampling the clock {count} time(s)...")
        try:
            clock = SubprocessClockSampler() if spawn else ClockSampler()
            overhead = OverheadCalibrator(clock).calibrate(count)
        except ClockUnavailableError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Calibration failed: {e}"
            result_obj.output = TimingCalibrateOutput(
                errors=[str(e)],
                warnings=warnings,
                loops=count,
                sampler=sampler_name,
                overhead="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        overhead_text = format(overhead, ".9f")
        result_obj.result = f"Clock overhead: {overhead_text}s per sample"
        result_obj.output = TimingCalibrateOutput(
            errors=[],
            warnings=warnings,
            loops=count,
            sampler=sampler_name,
            overhead=overhead_text,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Calibrating clock overhead...", progress_callback=do_work)
