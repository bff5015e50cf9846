"""Video identifier extraction from watch-page URLs."""

import re
from typing import Optional

WATCH_URL_PATTERN = re.compile(r"https://www\.youtube\.com/watch\?v=(.+)")


def extract_video_id(url: str) -> Optional[str]:
    """Return everything after ``watch?v=``, or None if the URL has another shape."""
    match = WATCH_URL_PATTERN.fullmatch(url)
    if match is None:
        return None
    return match.group(1)
