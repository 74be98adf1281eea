import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str | int = logging.INFO) -> None:
    """Configure unified reporttime logging.

    Hooks run inside the user's prompt, so nothing is written to the terminal;
    all records go to a rotating file under the home directory.

    Args:
        home: Path to reporttime home directory. If None, derived from environment.
        level: Logging level name or number for the ``reporttime`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "reporttime.log"

    root_logger = logging.getLogger("reporttime")
    root_logger.setLevel(level)
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers so the next configure_logging() call takes effect."""
    global _CONFIGURED
    root_logger = logging.getLogger("reporttime")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False

