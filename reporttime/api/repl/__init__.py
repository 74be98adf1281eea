"""REPL integration."""

from .TimedConsole import TimedConsole

__all__ = ["TimedConsole"]
