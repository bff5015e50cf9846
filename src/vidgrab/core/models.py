"""Data models for video metadata."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

_MISSING = object()


@dataclass(frozen=True)
class StreamingFormat:
    """Represents one entry of ``streamingData.formats``."""
    quality_label: Optional[str]  # e.g., "360p"
    mime_type: Optional[str]      # e.g., 'video/mp4; codecs="avc1.42001E, mp4a.40.2"'
    url: Optional[str]
    itag: Optional[int] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "StreamingFormat":
        """Build a format from a raw record, keeping only string fields."""
        def text(key):
            value = record.get(key)
            return value if isinstance(value, str) else None

        itag = record.get("itag")
        return cls(
            quality_label=text("qualityLabel"),
            mime_type=text("mimeType"),
            url=text("url"),
            itag=itag if isinstance(itag, int) else None,
        )


class VideoInfo:
    """Read-only view over the ``player_response`` JSON tree.

    The endpoint's shape is not documented, so nothing is validated up front.
    Fields are reached with :meth:`get`, which returns a default instead of
    raising when the path does not exist.
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    @property
    def data(self) -> Dict[str, Any]:
        return self._data

    def get(self, *path, default=None):
        """Walk ``path`` (dict keys and list indices) from the document root."""
        node = self._data
        for key in path:
            if isinstance(node, dict) and isinstance(key, str):
                node = node.get(key, _MISSING)
            elif isinstance(node, list) and isinstance(key, int):
                node = node[key] if -len(node) <= key < len(node) else _MISSING
            else:
                return default
            if node is _MISSING:
                return default
        return node

    def formats(self) -> Iterator[StreamingFormat]:
        """Yield streaming formats in the order the endpoint listed them."""
        records = self.get("streamingData", "formats", default=[])
        if not isinstance(records, list):
            return
        for record in records:
            if isinstance(record, dict):
                yield StreamingFormat.from_record(record)

    @property
    def title(self) -> Optional[str]:
        title = self.get("videoDetails", "title")
        return title if isinstance(title, str) else None

    def __repr__(self):
        return f"VideoInfo(title={self.title!r})"
