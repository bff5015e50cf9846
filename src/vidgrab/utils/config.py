"""Configuration management."""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULTS = {
    "output_dir": ".",
    "quality": "360p",
    "codec": "mp4",
    "extension": ".mp4",
    "info_url": "https://www.youtube.com/get_video_info",
    "timeout": None,
    "max_retries": 0,
    "check_status": True,
    "sanitize_filenames": True,
    "user_agent": None,
}

# Accepted JSON types per key; bool is excluded from the numeric keys
TYPES = {
    "output_dir": (str,),
    "quality": (str,),
    "codec": (str,),
    "extension": (str,),
    "info_url": (str,),
    "timeout": (int, float, type(None)),
    "max_retries": (int,),
    "check_status": (bool,),
    "sanitize_filenames": (bool,),
    "user_agent": (str, type(None)),
}


def _valid(key, value) -> bool:
    if isinstance(value, bool) and bool not in TYPES[key]:
        return False
    if not isinstance(value, TYPES[key]):
        return False
    if key in ("timeout", "max_retries") and value is not None and value < 0:
        return False
    return True


class Config:
    """Manages pipeline settings.

    Starts from ``DEFAULTS`` and is updated from an optional JSON file.
    There is no implicit settings file: nothing is read unless a path is given.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.file = Path(config_file) if config_file is not None else None
        self.data = dict(DEFAULTS)
        self.load()

    def load(self):
        """Load configuration from file."""
        if self.file is None:
            return
        if not self.file.exists():
            logger.warning(f"Config file not found, using defaults: {self.file}")
            return
        try:
            with open(self.file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read config file {self.file}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring config file {self.file}: expected a JSON object")
            return
        unknown = set(loaded) - set(DEFAULTS)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        for key, value in loaded.items():
            if key not in DEFAULTS:
                continue
            if not _valid(key, value):
                logger.warning(f"Ignoring config value {key}={value!r}: invalid value, using {DEFAULTS[key]!r}")
                continue
            self.data[key] = value

    def update(self, **overrides):
        """Apply overrides, skipping values left as None (e.g. unset CLI flags)."""
        for key, value in overrides.items():
            if key not in DEFAULTS:
                raise KeyError(key)
            if value is not None:
                self.data[key] = value

    @property
    def output_dir(self) -> Path:
        """Get the download directory."""
        return Path(self.data["output_dir"])

    @property
    def quality(self) -> str:
        return self.data["quality"]

    @property
    def codec(self) -> str:
        return self.data["codec"]

    @property
    def extension(self) -> str:
        return self.data["extension"]

    @property
    def info_url(self) -> str:
        return self.data["info_url"]

    @property
    def timeout(self) -> Optional[float]:
        return self.data["timeout"]

    @property
    def max_retries(self) -> int:
        return self.data["max_retries"]

    @property
    def check_status(self) -> bool:
        return bool(self.data["check_status"])

    @property
    def sanitize_filenames(self) -> bool:
        return bool(self.data["sanitize_filenames"])

    @property
    def user_agent(self) -> Optional[str]:
        return self.data["user_agent"]
