import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from voicecmd.database.engine import create_database_url
from voicecmd.database.migrate import upgrade_to_head
from voicecmd.dependencies import get_app_state
from voicecmd.routes import commands
from voicecmd.routes import system
from voicecmd.types.transcription_result import TranscriberStatus

logging.basicConfig(level=logging.INFO)


logger: Final = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
    app_state: Final = get_app_state()
    upgrade_to_head(database_url=create_database_url(app_state.config.database_file))

    transcription_status: Final = await app_state.transcriber.check_health()
    if transcription_status == TranscriberStatus.READY:
        logger.info(f"Transcription server at {app_state.config.whisper_server_url} is ready")
    else:
        logger.warning(
            f"Transcription server at {app_state.config.whisper_server_url} is {transcription_status.value}"
        )
    yield


app: Final = FastAPI(lifespan=lifespan)
# Requests come from a browser extension with an arbitrary origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(system.router)
app.include_router(commands.router)

if __name__ == "__main__":
    uvicorn.run(app)
