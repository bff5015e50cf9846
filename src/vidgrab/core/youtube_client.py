"""Video metadata extraction from the ``get_video_info`` endpoint."""

import json
import logging
from typing import Optional
from urllib.parse import parse_qs
import requests

from .errors import FetchError, MetadataError, VideoIdError
from .models import VideoInfo
from .session import build_session
from .video_id import extract_video_id

logger = logging.getLogger(__name__)

INFO_URL = "https://www.youtube.com/get_video_info"


class YouTubeClient:
    """Handles interaction with YouTube to extract metadata."""

    def __init__(self, info_url: str = INFO_URL, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None, check_status: bool = True):
        self.info_url = info_url
        self.timeout = timeout
        self.check_status = check_status
        self._owns_session = session is None
        self.session = session if session is not None else build_session()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self._owns_session:
            self.session.close()

    def build_info_url(self, video_id: str) -> str:
        """Metadata endpoint URL for ``video_id``."""
        return f"{self.info_url}?video_id={video_id}&el=embedded&ps=default"

    def fetch_player_response(self, video_id: str) -> str:
        """Return the raw ``player_response`` JSON text, or "" if the body has none."""
        info_url = self.build_info_url(video_id)
        logger.debug(f"GET {info_url}")
        try:
            resp = self.session.get(info_url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch metadata: {e}") from e

        if self.check_status:
            try:
                resp.raise_for_status()
            except requests.HTTPError as e:
                raise FetchError(f"Failed to fetch metadata: {e}") from e
        elif not resp.ok:
            logger.warning(f"Metadata endpoint answered {resp.status_code}, parsing body anyway")

        fields = parse_qs(resp.text, keep_blank_values=True)
        values = fields.get("player_response")
        if not values:
            logger.debug("No player_response field in metadata response")
            return ""
        return values[0]

    def get_video_info(self, url: str) -> VideoInfo:
        """Extracts the video id from ``url`` and fetches its metadata document."""
        video_id = extract_video_id(url)
        if video_id is None:
            raise VideoIdError()
        logger.info(f"Fetching metadata for video {video_id}")

        payload = self.fetch_player_response(video_id)
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise MetadataError(f"Failed to parse metadata: {e}") from e
        if not isinstance(data, dict):
            raise MetadataError(f"Failed to parse metadata: expected a JSON object, "
                                f"got {type(data).__name__}")
        return VideoInfo(data)
