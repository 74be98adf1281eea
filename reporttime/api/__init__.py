"""API module for reporttime.

Functions defined here serve as the single source of truth for the CLI commands
and the shell/REPL hosts.
"""

__all__ = []
