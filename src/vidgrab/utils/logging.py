"""Logging utilities."""

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_ERROR_LOG = Path.home() / "vidgrab_error.log"


def setup_logging(verbose: bool = False):
    """Send log records to stdout; DEBUG when verbose, INFO otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
    )
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO if verbose else logging.WARNING)


def log_error(msg: str, exc: Exception | None = None, log_file: Optional[Path] = None):
    """Log errors to a file for debugging."""
    log_file = log_file or DEFAULT_ERROR_LOG
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"{msg}\n")
            if exc:
                f.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
            f.write("-" * 50 + "\n")
    except OSError:
        pass  # Can't log if logging fails
