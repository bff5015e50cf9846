"""Core functionality for vidgrab."""

from .errors import (
    VidGrabError,
    VideoLinkMissingError,
    VideoIdError,
    FetchError,
    MetadataError,
    FormatNotFoundError,
    TitleNotFoundError,
    DownloadError,
)
from .models import StreamingFormat, VideoInfo
from .video_id import extract_video_id
from .youtube_client import YouTubeClient
from .selector import quality_codec_predicate, select_format, get_video_download_url
from .naming import get_video_file_name
from .downloader import MediaDownloader

__all__ = [
    "VidGrabError",
    "VideoLinkMissingError",
    "VideoIdError",
    "FetchError",
    "MetadataError",
    "FormatNotFoundError",
    "TitleNotFoundError",
    "DownloadError",
    "StreamingFormat",
    "VideoInfo",
    "extract_video_id",
    "YouTubeClient",
    "quality_codec_predicate",
    "select_format",
    "get_video_download_url",
    "get_video_file_name",
    "MediaDownloader",
]
