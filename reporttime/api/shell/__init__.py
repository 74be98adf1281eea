"""Shell integration: bash and zsh hook scripts."""

from .render_init_script import SUPPORTED_SHELLS, render_init_script

__all__ = ["SUPPORTED_SHELLS", "render_init_script"]
