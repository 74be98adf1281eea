"""Init command - print the hook script for a shell."""

from collections.abc import Iterator

from ..config.load_config_with_warnings import load_config_with_warnings
from ..StageResult import StageResult
from .._output_schemas.shell import ShellInitOutput
from .render_init_script import render_init_script


def cmd_init(shell: str) -> StageResult:
    """Render the integration script to be evaluated by ``shell``.

    Args:
        shell: "bash" or "zsh"
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config, warnings = load_config_with_warnings()

        yield (0.6, f"Rendering {shell} script...")
        try:
            script = render_init_script(shell, config)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ShellInitOutput(errors=[str(e)], warnings=warnings, shell=shell, script="").model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {shell} integration"
        result_obj.output = ShellInitOutput(errors=[], warnings=warnings, shell=shell, script=script).model_dump(
            mode="python"
        )
        result_obj.success = True

    return StageResult(announce=f"Preparing {shell} integration...", progress_callback=do_work)
