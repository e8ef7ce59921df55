import os
from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from dotenv import load_dotenv

DATABASE_FILE_ENV_VARIABLE = "DATABASE_FILE"

load_dotenv()


def get_environment_variable_or_raise(key: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        raise ValueError(f"Environment variable '{key}' is not set.")
    return value.strip()


def get_environment_variable_or_default(
    key: str,
    default: str | None,
) -> str | None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_positive_number(key: str, default: float) -> float:
    text: Final = get_environment_variable_or_default(key, None)
    if text is None:
        return default
    try:
        value: Final = float(text)
    except ValueError as e:
        raise ValueError(f"Environment variable '{key}' must be a number, got '{text}'.") from e
    if value <= 0:
        raise ValueError(f"Environment variable '{key}' must be positive, got '{text}'.")
    return value


@final
class Config:
    DEFAULT_TRANSCRIPTION_TIMEOUT_SECONDS = 30.0
    DEFAULT_HEALTH_CHECK_TIMEOUT_SECONDS = 2.0
    DEFAULT_MIN_AUDIO_FILE_SIZE_BYTES = 1000
    DEFAULT_MAX_AUDIO_FILE_SIZE_BYTES = 50 * 1024 * 1024

    def __init__(self) -> None:
        self._database_file: Optional[Path] = None
        self._whisper_server_url: Optional[str] = None
        self._transcription_timeout_seconds = Config.DEFAULT_TRANSCRIPTION_TIMEOUT_SECONDS
        self._health_check_timeout_seconds = Config.DEFAULT_HEALTH_CHECK_TIMEOUT_SECONDS
        self._min_audio_file_size_bytes = Config.DEFAULT_MIN_AUDIO_FILE_SIZE_BYTES
        self._max_audio_file_size_bytes = Config.DEFAULT_MAX_AUDIO_FILE_SIZE_BYTES
        self.reload()

    def reload(self) -> None:
        load_dotenv()
        self._database_file = Path(get_environment_variable_or_raise(DATABASE_FILE_ENV_VARIABLE))
        self._whisper_server_url = get_environment_variable_or_raise("WHISPER_SERVER").rstrip("/")
        self._transcription_timeout_seconds = _get_positive_number(
            "TRANSCRIPTION_TIMEOUT_SECONDS",
            Config.DEFAULT_TRANSCRIPTION_TIMEOUT_SECONDS,
        )
        self._health_check_timeout_seconds = _get_positive_number(
            "HEALTH_CHECK_TIMEOUT_SECONDS",
            Config.DEFAULT_HEALTH_CHECK_TIMEOUT_SECONDS,
        )
        self._min_audio_file_size_bytes = int(
            _get_positive_number("MIN_AUDIO_FILE_SIZE_BYTES", Config.DEFAULT_MIN_AUDIO_FILE_SIZE_BYTES)
        )
        self._max_audio_file_size_bytes = int(
            _get_positive_number("MAX_AUDIO_FILE_SIZE_BYTES", Config.DEFAULT_MAX_AUDIO_FILE_SIZE_BYTES)
        )
        if self._min_audio_file_size_bytes > self._max_audio_file_size_bytes:
            raise ValueError("MIN_AUDIO_FILE_SIZE_BYTES must not exceed MAX_AUDIO_FILE_SIZE_BYTES.")

        self._database_file.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_file(self) -> Path:
        if self._database_file is None:
            raise AssertionError("Database file path is not set. This should not happen.")
        return self._database_file

    @property
    def whisper_server_url(self) -> str:
        if self._whisper_server_url is None:
            raise AssertionError("Whisper server URL is not set. This should not happen.")
        return self._whisper_server_url

    @property
    def transcription_timeout_seconds(self) -> float:
        return self._transcription_timeout_seconds

    @property
    def health_check_timeout_seconds(self) -> float:
        return self._health_check_timeout_seconds

    @property
    def min_audio_file_size_bytes(self) -> int:
        return self._min_audio_file_size_bytes

    @property
    def max_audio_file_size_bytes(self) -> int:
        return self._max_audio_file_size_bytes
