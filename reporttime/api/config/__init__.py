"""Config API module."""

from .ConfigError import ConfigError
from .ReportTimeConfig import ReportTimeConfig

__all__ = ["ConfigError", "ReportTimeConfig"]
