import json
from pathlib import Path

import pytest

from vidgrab.utils import Config
from vidgrab.utils.config import DEFAULTS


def test_defaults_without_file():
    config = Config()
    assert config.data == DEFAULTS
    assert config.output_dir == Path(".")
    assert config.quality == "360p"
    assert config.codec == "mp4"
    assert config.extension == ".mp4"
    assert config.timeout is None
    assert config.max_retries == 0
    assert config.check_status is True
    assert config.sanitize_filenames is True


def test_load_from_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"quality": "720p", "timeout": 30, "output_dir": "videos"}))

    config = Config(path)

    assert config.quality == "720p"
    assert config.timeout == 30
    assert config.output_dir == Path("videos")
    assert config.codec == "mp4"


def test_unknown_keys_ignored(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"download_path": "/tmp", "codec": "avc1"}))

    config = Config(path)

    assert "download_path" not in config.data
    assert config.codec == "avc1"
    assert "download_path" in caplog.text


@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
def test_invalid_file_keeps_defaults(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    assert Config(path).data == DEFAULTS


def test_missing_file_keeps_defaults(tmp_path):
    assert Config(tmp_path / "nope.json").data == DEFAULTS


def test_update_skips_none():
    config = Config()
    config.update(quality="1080p", codec=None)
    assert config.quality == "1080p"
    assert config.codec == "mp4"
    with pytest.raises(KeyError):
        config.update(colour="blue")


@pytest.mark.parametrize("key, value", [
    ("timeout", "30"),
    ("timeout", True),
    ("timeout", -1),
    ("max_retries", "x"),
    ("max_retries", 1.5),
    ("max_retries", -2),
    ("codec", 5),
    ("output_dir", None),
    ("check_status", "no"),
    ("user_agent", 7),
])
def test_mistyped_value_keeps_default(tmp_path, caplog, key, value):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({key: value, "quality": "480p"}))

    config = Config(path)

    assert config.data[key] == DEFAULTS[key]
    assert config.quality == "480p"
    assert f"Ignoring config value {key}=" in caplog.text


def test_valid_typed_values_are_kept(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"timeout": 2.5, "max_retries": 3, "check_status": False,
                                "user_agent": "vidgrab/1.0"}))

    config = Config(path)

    assert config.timeout == 2.5
    assert config.max_retries == 3
    assert config.check_status is False
    assert config.user_agent == "vidgrab/1.0"
