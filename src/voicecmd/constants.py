from typing import Final

SERVICE_NAME: Final = "Voice Command Server"
SERVICE_VERSION: Final = "2.0.0"

ACCEPTED_AUDIO_CONTENT_TYPES: Final = frozenset({"application/octet-stream"})
ACCEPTED_AUDIO_CONTENT_TYPE_PREFIX: Final = "audio/"
ACCEPTED_AUDIO_FILE_EXTENSIONS: Final = (".wav", ".webm")
DEFAULT_AUDIO_FILENAME: Final = "voice.webm"
