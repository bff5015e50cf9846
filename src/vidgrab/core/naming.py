"""Output filename resolution."""

from typing import Optional

from ..utils.paths import sanitize_filename
from .models import VideoInfo

DEFAULT_EXTENSION = ".mp4"


def get_video_file_name(info: VideoInfo, extension: str = DEFAULT_EXTENSION,
                        sanitize: bool = True) -> Optional[str]:
    """Build ``<title><extension>`` from ``videoDetails.title``.

    Returns None when the metadata has no title. With ``sanitize`` the title
    is made safe to use as a single path component first.
    """
    title = info.title
    if title is None:
        return None
    if sanitize:
        title = sanitize_filename(title)
    return f"{title}{extension}"
