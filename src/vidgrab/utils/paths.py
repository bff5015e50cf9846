"""Path resolution utilities."""

import re
from pathlib import Path

# Reserved on Windows, separators everywhere, plus ASCII control characters
_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str, fallback: str = "video") -> str:
    """Turn a remote title into a single, safe path component."""
    safe = _UNSAFE_CHARS.sub("_", name)
    safe = safe.strip().rstrip(".").strip()
    return safe or fallback


def resolve_output_path(directory: str | Path, file_name: str) -> Path:
    """Join the output directory and the resolved file name."""
    return Path(directory).expanduser() / file_name
