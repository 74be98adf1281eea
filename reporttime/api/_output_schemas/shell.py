"""Output schemas for shell integration commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ShellInitOutput(BaseOutputSchema):
    """Output schema for the init command."""
    shell: str = Field(..., description="Target shell name")
    script: str = Field(..., description="Script to source or eval in the shell, empty on error")


register_output_schema("shell", "init", ShellInitOutput)
