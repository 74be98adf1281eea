"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .ConfigError import ConfigError
from .ReportTimeConfig import ReportTimeConfig


def cmd_show() -> StageResult:
    """Show the effective configuration after file and environment overrides."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Locating configuration file...")
        config_path = ReportTimeConfig.get_config_path()
        exists = config_path.exists()

        yield (0.6, "Loading configuration...")
        try:
            config = ReportTimeConfig.load()
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(config_path),
                config_file_exists=exists,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = [] if exists else [f"No configuration file at {config_path}; using defaults"]
        yield (1.0, "Complete")
        result_obj.result = "Loaded configuration"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            content=config.to_dict(),
            config_path=str(config_path),
            config_file_exists=exists,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
