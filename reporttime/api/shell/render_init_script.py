"""Render the hook script for a shell."""

import shlex
import shutil
import sys
from collections.abc import Sequence

from ...templating import render_template
from ...utils.get_package_version import get_package_version
from ..config.ReportTimeConfig import ReportTimeConfig
from .templates import TEMPLATES

SUPPORTED_SHELLS = tuple(TEMPLATES)


def default_executable() -> list[str]:
    """Command line that runs reporttime from inside the shell hooks."""
    found = shutil.which("reporttime")
    if found:
        return [found]
    return [sys.executable, "-m", "reporttime"]


def render_init_script(
    shell: str,
    config: ReportTimeConfig,
    executable: Sequence[str] | None = None,
) -> str:
    """Render the integration script for ``shell`` with ``config`` as defaults.

    Raises:
        ValueError: If the shell is not supported or the bypass command is not a valid function name
    """
    if shell not in TEMPLATES:
        raise ValueError(f"Unsupported shell: {shell!r} (supported: {', '.join(SUPPORTED_SHELLS)})")
    if not config.bypass_command.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Bypass command {config.bypass_command!r} is not a valid shell function name")

    exe = shlex.join(list(executable) if executable else default_executable())
    return render_template(
        TEMPLATES[shell],
        {
            "version": get_package_version(),
            "exe": exe,
            "threshold": shlex.quote(config.threshold_text()),
            "precision": config.precision,
            "loops": config.calibration_loops,
            "bypass": config.bypass_command,
        },
    )
