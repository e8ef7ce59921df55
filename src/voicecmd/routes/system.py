import logging
from typing import Annotated
from typing import Final
from uuid import uuid4

from fastapi import Depends
from fastapi.routing import APIRouter

from voicecmd.app_state import AppState
from voicecmd.constants import SERVICE_NAME
from voicecmd.constants import SERVICE_VERSION
from voicecmd.dependencies import get_app_state
from voicecmd.models.system_responses import HealthResponse
from voicecmd.models.system_responses import ServiceInfoResponse
from voicecmd.models.system_responses import UserIdResponse
from voicecmd.utils.request_context import utc_timestamp

router: Final = APIRouter()

logger: Final = logging.getLogger(__name__)


@router.get("/")
async def service_info(app_state: Annotated[AppState, Depends(get_app_state)]) -> ServiceInfoResponse:
    return ServiceInfoResponse(
        detail=SERVICE_NAME,
        transcription_server=app_state.config.whisper_server_url,
        version=SERVICE_VERSION,
        status="running",
        timestamp=utc_timestamp(),
    )


@router.get("/get-user-id")
async def get_user_id() -> UserIdResponse:
    user_id: Final = str(uuid4())
    logger.info(f"Generated new user ID: {user_id}")
    return UserIdResponse(user_id=user_id, timestamp=utc_timestamp())


@router.get("/health")
async def health(app_state: Annotated[AppState, Depends(get_app_state)]) -> HealthResponse:
    transcription_status: Final = await app_state.transcriber.check_health()
    database_status: Final = "connected" if app_state.database.ping() else "unreachable"
    return HealthResponse(
        api_status="healthy",
        transcription_status=transcription_status,
        database_status=database_status,
        timestamp=utc_timestamp(),
    )
