"""Shared fixtures: canned metadata and fake HTTP responses."""

import io
import json
from unittest import mock
from urllib.parse import urlencode

import pytest
import requests

from vidgrab.core import VideoInfo

MEDIA_URL = "https://rr1---sn-example.googlevideo.com/videoplayback?itag=18&id=abc"
MEDIA_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"x" * 200_000


def make_player_response(formats=None, title="My Video"):
    data = {"playabilityStatus": {"status": "OK"}}
    if formats is not None:
        data["streamingData"] = {"formats": formats}
    if title is not None:
        data["videoDetails"] = {"videoId": "0YJq7mzVw7c", "title": title}
    return data


def make_response(body=b"", status=200, url="https://example.invalid/", raw=None):
    """Build a real ``requests.Response`` around ``body`` (or a custom raw stream)."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Error"
    resp.url = url
    resp.encoding = "utf-8"
    resp.raw = raw if raw is not None else io.BytesIO(body)
    return resp


def info_body(player_response, **extra):
    """URL-encoded body the ``get_video_info`` endpoint answers with."""
    fields = {"status": "ok", **extra}
    if player_response is not None:
        fields["player_response"] = (player_response if isinstance(player_response, str)
                                     else json.dumps(player_response))
    return urlencode(fields)


@pytest.fixture
def formats():
    return [
        {"itag": 17, "qualityLabel": "144p", "mimeType": 'video/3gpp; codecs="mp4v.20.3, mp4a.40.2"',
         "url": "https://media.example/144"},
        {"itag": 43, "qualityLabel": "360p", "mimeType": 'video/webm; codecs="vp8.0, vorbis"',
         "url": "https://media.example/webm"},
        {"itag": 18, "qualityLabel": "360p", "mimeType": 'video/mp4; codecs="avc1.42001E, mp4a.40.2"',
         "url": MEDIA_URL},
        {"itag": 22, "qualityLabel": "720p", "mimeType": 'video/mp4; codecs="avc1.64001F, mp4a.40.2"',
         "url": "https://media.example/720"},
    ]


@pytest.fixture
def player_response(formats):
    return make_player_response(formats)


@pytest.fixture
def video_info(player_response):
    return VideoInfo(player_response)


def make_session(player_response):
    """Session answering the metadata endpoint and the media URL."""
    session = mock.MagicMock(spec=requests.Session)

    def get(url, **kwargs):
        if "get_video_info" in url:
            return make_response(info_body(player_response), url=url)
        return make_response(MEDIA_BYTES, url=url)

    session.get.side_effect = get
    return session


@pytest.fixture
def fake_session(player_response):
    return make_session(player_response)
