from functools import lru_cache

from voicecmd.app_state import AppState
from voicecmd.globals import Globals


@lru_cache
def get_app_state() -> AppState:
    # Returns a singleton instance of `Globals` which implements
    # the `AppState` interface.
    return Globals()
