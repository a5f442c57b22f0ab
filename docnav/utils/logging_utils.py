"""Logging utilities for docnav.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

The terminal browser must never write log lines onto the screen, so
`setup_tui_logging` routes everything to a rotating file in the config
directory before the app starts.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Names of the root handlers docnav installs
CLI_HANDLER_NAME = "docnav-cli"
TUI_HANDLER_NAME = "docnav-tui"


def _remove_named_handler(logger: logging.Logger, name: str) -> None:
    for handler in list(logger.handlers):
        if handler.get_name() == name:
            logger.removeHandler(handler)
            handler.close()


def setup_tui_logging(
    module_name: str, log_dir: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """
    Set up file logging for the terminal browser.

    The stderr handler installed by setup_cli_logging is replaced with a
    rotating file handler, so nothing is written over the running app.
    The root logger is set to WARNING to avoid noise from third-party libs.
    docnav's own loggers (docnav.*) are set to INFO, or DEBUG when verbose.

    Returns:
        Logger for module_name
    """
    if log_dir is None:
        from docnav.config.constants import DOCNAV_CONFIG_DIR

        log_dir = DOCNAV_CONFIG_DIR

    root = logging.getLogger()
    _remove_named_handler(root, CLI_HANDLER_NAME)

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tui.log"

        if not any(h.get_name() == TUI_HANDLER_NAME for h in root.handlers):
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.set_name(TUI_HANDLER_NAME)
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(handler)
            root.setLevel(logging.WARNING)

        logging.getLogger("docnav").setLevel(logging.DEBUG if verbose else logging.INFO)
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)

    return logging.getLogger(module_name)


def setup_cli_logging(verbose: bool = False) -> None:
    """Send docnav log records to stderr for one-shot CLI commands."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    # Rebind to the current stderr on every call
    _remove_named_handler(root, CLI_HANDLER_NAME)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CLI_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    logging.getLogger("docnav").setLevel(level)
