"""Streaming format selection."""

import logging
import re
from typing import Callable, Optional

from .models import StreamingFormat, VideoInfo

logger = logging.getLogger(__name__)

FormatPredicate = Callable[[StreamingFormat], bool]

DEFAULT_QUALITY = "360p"
DEFAULT_CODEC = "mp4"


def quality_codec_predicate(quality: str = DEFAULT_QUALITY,
                            codec: str = DEFAULT_CODEC) -> FormatPredicate:
    """Accept formats with exactly ``quality`` and ``codec`` inside ``codecs=``."""
    codec_regex = re.compile(r"codecs=(.*" + re.escape(codec) + r".*)")

    def predicate(fmt: StreamingFormat) -> bool:
        if fmt.quality_label != quality or fmt.mime_type is None:
            return False
        return codec_regex.search(fmt.mime_type) is not None

    return predicate


def select_format(info: VideoInfo,
                  predicate: Optional[FormatPredicate] = None) -> Optional[StreamingFormat]:
    """Return the first format accepted by ``predicate``, in list order."""
    if predicate is None:
        predicate = quality_codec_predicate()

    for fmt in info.formats():
        if predicate(fmt):
            logger.debug(f"Selected format itag={fmt.itag} ({fmt.quality_label}, {fmt.mime_type})")
            return fmt
    return None


def get_video_download_url(info: VideoInfo,
                           predicate: Optional[FormatPredicate] = None) -> Optional[str]:
    """Direct media URL of the selected format, or None if nothing matched."""
    fmt = select_format(info, predicate)
    if fmt is None:
        return None
    return fmt.url
