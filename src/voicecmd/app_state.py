from abc import ABC
from abc import abstractmethod

from voicecmd.config import Config
from voicecmd.database.engine import Database
from voicecmd.transcription.transcriber import Transcriber


class AppState(ABC):
    @property
    @abstractmethod
    def config(self) -> Config:
        pass

    @property
    @abstractmethod
    def database(self) -> Database:
        pass

    @property
    @abstractmethod
    def transcriber(self) -> Transcriber:
        pass
