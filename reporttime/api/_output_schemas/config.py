"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - content: dict[str, Any] - effective configuration, empty dict on error
    - config_path: str - path to the configuration file
    - config_file_exists: bool - whether the configuration file was found
    """
    content: dict[str, Any] = Field(..., description="Effective configuration after file and environment overrides")
    config_path: str = Field(..., description="Path to the configuration file")
    config_file_exists: bool = Field(..., description="Whether the configuration file exists")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
