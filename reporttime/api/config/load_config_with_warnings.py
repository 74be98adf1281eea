"""Load configuration, falling back to defaults on error."""

from .ConfigError import ConfigError
from .ReportTimeConfig import ReportTimeConfig


def load_config_with_warnings() -> tuple[ReportTimeConfig, list[str]]:
    """Load ReportTimeConfig; on error return the defaults plus a warning.

    A broken config file must not stop commands from being timed, so callers
    keep working with default settings and surface the problem as a warning.

    Returns:
        (config, warnings)
    """
    try:
        return ReportTimeConfig.load(), []
    except ConfigError as e:
        return ReportTimeConfig(), [f"{e}; using defaults"]
