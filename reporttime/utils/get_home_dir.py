"""Get reporttime home directory path or path under it."""

import os
from pathlib import Path

from ..constants import REPORTTIME_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get reporttime home directory path or path under it.

    Checks REPORTTIME_HOME environment variable first, defaults to ~/.reporttime if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "reporttime.log")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.reporttime")
        >>> get_home_dir("config.json")
        Path("/Users/user/.reporttime/config.json")
    """
    home_env = os.environ.get("REPORTTIME_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        user_home = os.environ.get("HOME")
        home = Path(user_home) / REPORTTIME_HOME_EXT if user_home else Path.home() / REPORTTIME_HOME_EXT

    return home / Path(*parts) if parts else home
