from pathlib import Path
from typing import Final

import pytest

from voicecmd.config import Config

_OPTIONAL_VARIABLES: Final = (
    "TRANSCRIPTION_TIMEOUT_SECONDS",
    "HEALTH_CHECK_TIMEOUT_SECONDS",
    "MIN_AUDIO_FILE_SIZE_BYTES",
    "MAX_AUDIO_FILE_SIZE_BYTES",
)


@pytest.fixture(autouse=True)
def _required_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_FILE", str(tmp_path / "data" / "commands.db"))
    monkeypatch.setenv("WHISPER_SERVER", " http://localhost:8001/ ")
    for key in _OPTIONAL_VARIABLES:
        monkeypatch.delenv(key, raising=False)


def test_defaults(tmp_path: Path) -> None:
    config: Final = Config()
    assert config.database_file == tmp_path / "data" / "commands.db"
    assert config.database_file.parent.is_dir()
    assert config.whisper_server_url == "http://localhost:8001"
    assert config.transcription_timeout_seconds == 30.0
    assert config.health_check_timeout_seconds == 2.0
    assert config.min_audio_file_size_bytes == 1000
    assert config.max_audio_file_size_bytes == 50 * 1024 * 1024


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSCRIPTION_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("MIN_AUDIO_FILE_SIZE_BYTES", "10")
    config: Final = Config()
    assert config.transcription_timeout_seconds == 12.5
    assert config.min_audio_file_size_bytes == 10


@pytest.mark.parametrize("key", ["DATABASE_FILE", "WHISPER_SERVER"])
def test_missing_required_variable(monkeypatch: pytest.MonkeyPatch, key: str) -> None:
    monkeypatch.setenv(key, "   ")
    with pytest.raises(ValueError, match=f"Environment variable '{key}' is not set"):
        Config()


@pytest.mark.parametrize(
    ("key", "value", "error_match"),
    [
        ("TRANSCRIPTION_TIMEOUT_SECONDS", "soon", "must be a number"),
        ("HEALTH_CHECK_TIMEOUT_SECONDS", "0", "must be positive"),
        ("MIN_AUDIO_FILE_SIZE_BYTES", "-5", "must be positive"),
    ],
)
def test_invalid_numbers(monkeypatch: pytest.MonkeyPatch, key: str, value: str, error_match: str) -> None:
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError, match=error_match):
        Config()


def test_min_size_must_not_exceed_max_size(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MIN_AUDIO_FILE_SIZE_BYTES", "2048")
    monkeypatch.setenv("MAX_AUDIO_FILE_SIZE_BYTES", "1024")
    with pytest.raises(ValueError, match="must not exceed"):
        Config()
