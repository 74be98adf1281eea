"""Output schemas for API commands, registered per (domain, command)."""

from . import config, shell, timing  # noqa: F401
from ._registry import get_output_schema

__all__ = ["get_output_schema"]
