"""Utility functions and classes for vidgrab."""

from .config import Config
from .paths import sanitize_filename, resolve_output_path
from .logging import setup_logging, log_error

__all__ = ["Config", "sanitize_filename", "resolve_output_path", "setup_logging", "log_error"]
