from typing import Final
from typing import final
from typing import override

from voicecmd.app_state import AppState
from voicecmd.config import Config
from voicecmd.database.engine import Database
from voicecmd.transcription.transcriber import Transcriber
from voicecmd.transcription.whisper_client import WhisperClient


@final
class Globals(AppState):
    def __init__(self) -> None:
        self._config: Final = Config()
        self._database: Final = Database(self.config.database_file, echo=False)
        self._transcriber: Final = WhisperClient(
            self.config.whisper_server_url,
            timeout_seconds=self.config.transcription_timeout_seconds,
            health_timeout_seconds=self.config.health_check_timeout_seconds,
        )

    @property
    @override
    def config(self) -> Config:
        return self._config

    @property
    @override
    def database(self) -> Database:
        return self._database

    @property
    @override
    def transcriber(self) -> Transcriber:
        return self._transcriber
