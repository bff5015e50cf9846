"""Streaming file download."""

import logging
from pathlib import Path
from typing import Optional
import requests
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from .errors import DownloadError
from .session import build_session

logger = logging.getLogger(__name__)


class MediaDownloader:
    """Streams one URL into one local file.

    The destination is opened in ``wb`` mode, so an existing file is
    overwritten. If the transfer fails midway the partial file is left as is.
    """

    def __init__(self, url: str, output_path: Path, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None, chunk_size: int = 1024 * 64):
        self.url = url
        self.output_path = Path(output_path)
        self.timeout = timeout
        self.chunk_size = chunk_size
        self._owns_session = session is None
        self.session = session if session is not None else build_session()
        self.downloaded_bytes = 0

    def start(self) -> Path:
        """Starts the download process."""
        try:
            self._validate_url()
            self._download()
        finally:
            if self._owns_session:
                self.session.close()
        logger.info(f"Saved {self.downloaded_bytes} bytes to {self.output_path}")
        return self.output_path

    def _validate_url(self):
        try:
            parsed = parse_url(self.url)
        except LocationParseError as e:
            raise DownloadError(f"Invalid download url: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise DownloadError(f"Invalid download url: {self.url!r}")

    def _download(self):
        try:
            with self.session.get(self.url, stream=True, timeout=self.timeout) as r:
                r.raise_for_status()
                logger.debug(f"Streaming {r.headers.get('content-length', 'unknown')} bytes "
                             f"to {self.output_path}")

                with open(self.output_path, 'wb') as f:
                    for chunk in r.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            f.write(chunk)
                            self.downloaded_bytes += len(chunk)
        except requests.RequestException as e:
            raise DownloadError(f"Download failed: {e}") from e
        except OSError as e:
            raise DownloadError(f"Could not write {self.output_path}: {e}") from e
