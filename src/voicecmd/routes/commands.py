import logging
import time
from http import HTTPStatus
from typing import Annotated
from typing import Final
from typing import Optional

from fastapi import Depends
from fastapi import File
from fastapi import Form
from fastapi import HTTPException
from fastapi import UploadFile
from fastapi.routing import APIRouter
from starlette.responses import JSONResponse

from voicecmd.app_state import AppState
from voicecmd.constants import ACCEPTED_AUDIO_CONTENT_TYPE_PREFIX
from voicecmd.constants import ACCEPTED_AUDIO_CONTENT_TYPES
from voicecmd.constants import ACCEPTED_AUDIO_FILE_EXTENSIONS
from voicecmd.constants import DEFAULT_AUDIO_FILENAME
from voicecmd.dependencies import get_app_state
from voicecmd.matching.resolver import resolve
from voicecmd.models.command_requests import DeleteWorkflowCommandsRequest
from voicecmd.models.command_requests import ExecuteCommandRequest
from voicecmd.models.command_requests import SaveCommandRequest
from voicecmd.models.command_responses import DeleteCommandResponse
from voicecmd.models.command_responses import DeleteWorkflowCommandsResponse
from voicecmd.models.command_responses import SaveCommandResponse
from voicecmd.models.match_response import MatchResponse
from voicecmd.models.stored_command_model import StoredCommandModel
from voicecmd.models.voice_command_response import VoiceCommandResponse
from voicecmd.utils.request_context import elapsed_ms
from voicecmd.utils.request_context import new_request_id
from voicecmd.utils.request_context import utc_timestamp
from voicecmd.utils.tracing import make_logging_trace_hook

router: Final = APIRouter()

logger: Final = logging.getLogger(__name__)


def _json_response(status_code: int, body: VoiceCommandResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _is_accepted_audio(upload: UploadFile) -> bool:
    content_type: Final = upload.content_type or ""
    filename: Final = upload.filename or ""
    return (
        content_type.startswith(ACCEPTED_AUDIO_CONTENT_TYPE_PREFIX)
        or content_type in ACCEPTED_AUDIO_CONTENT_TYPES
        or filename.endswith(ACCEPTED_AUDIO_FILE_EXTENSIONS)
    )


@router.post("/voice-command")
async def voice_command(
    app_state: Annotated[AppState, Depends(get_app_state)],
    audio: Annotated[Optional[UploadFile], File()] = None,
    user_id: Annotated[str, Form()] = "",
) -> JSONResponse:
    """Transcribe an uploaded recording and resolve it against the user's commands."""
    request_id: Final = new_request_id("req")
    start: Final = time.perf_counter()

    if audio is None:
        logger.error(f"[{request_id}] No audio file provided in request")
        return _json_response(
            HTTPStatus.BAD_REQUEST,
            VoiceCommandResponse(
                success=False,
                error="No audio file provided",
                message="No audio file was received by server",
                request_id=request_id,
                timestamp=utc_timestamp(),
            ),
        )

    transcribed_text = ""
    try:
        if not _is_accepted_audio(audio):
            logger.error(f"[{request_id}] Rejected upload with content type '{audio.content_type}'")
            return _json_response(
                HTTPStatus.BAD_REQUEST,
                VoiceCommandResponse(
                    success=False,
                    error="Invalid file type",
                    message="Only audio files are allowed",
                    request_id=request_id,
                    timestamp=utc_timestamp(),
                ),
            )

        audio_data: Final = await audio.read()
        if len(audio_data) > app_state.config.max_audio_file_size_bytes:
            logger.error(f"[{request_id}] Audio file too large: {len(audio_data)} bytes")
            return _json_response(
                HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
                VoiceCommandResponse(
                    success=False,
                    error="Audio file too large",
                    message=f"Audio file too large: {len(audio_data)} bytes",
                    request_id=request_id,
                    timestamp=utc_timestamp(),
                ),
            )
        if len(audio_data) < app_state.config.min_audio_file_size_bytes:
            logger.error(f"[{request_id}] Audio file too small: {len(audio_data)} bytes")
            return _json_response(
                HTTPStatus.OK,
                VoiceCommandResponse(
                    success=False,
                    message=f"Audio file too small: {len(audio_data)} bytes",
                    request_id=request_id,
                    timestamp=utc_timestamp(),
                ),
            )

        transcription_start: Final = time.perf_counter()
        transcription: Final = await app_state.transcriber.transcribe(
            audio_data,
            filename=audio.filename or DEFAULT_AUDIO_FILENAME,
            content_type=audio.content_type,
        )
        transcription_time_ms: Final = elapsed_ms(transcription_start)
        logger.info(f"[{request_id}] Transcription completed in {transcription_time_ms} ms")

        if not transcription.success:
            logger.info(f"[{request_id}] Transcription failed: {transcription.message}")
            return _json_response(
                HTTPStatus.OK,
                VoiceCommandResponse(
                    success=False,
                    message=transcription.message or "Transcription failed",
                    processing_time_ms=elapsed_ms(start),
                    transcription_time_ms=transcription_time_ms,
                    request_id=request_id,
                    timestamp=utc_timestamp(),
                ),
            )

        transcribed_text = transcription.text.strip()
        if not transcribed_text:
            logger.info(f"[{request_id}] Empty transcription result")
            return _json_response(
                HTTPStatus.OK,
                VoiceCommandResponse(
                    success=False,
                    message="No speech detected in audio",
                    processing_time_ms=elapsed_ms(start),
                    transcription_time_ms=transcription_time_ms,
                    request_id=request_id,
                    timestamp=utc_timestamp(),
                ),
            )

        logger.info(f"[{request_id}] Matching transcription '{transcribed_text}' for user '{user_id}'")
        matching_start: Final = time.perf_counter()
        templates: Final = app_state.database.get_command_templates(user_id)
        result: Final = resolve(transcribed_text, templates, on_trace=make_logging_trace_hook(request_id))
        matching_time_ms: Final = elapsed_ms(matching_start)
        logger.info(f"[{request_id}] Match result: {result}")

        return _json_response(
            HTTPStatus.OK,
            VoiceCommandResponse(
                success=result.success,
                message=str(result.message),
                transcribed_text=transcribed_text,
                command=result.command,
                parameter=result.parameter,
                workflow_id=result.workflow_id,
                language=transcription.language,
                confidence=transcription.confidence,
                processing_time_ms=elapsed_ms(start),
                transcription_time_ms=transcription_time_ms,
                matching_time_ms=matching_time_ms,
                request_id=request_id,
                timestamp=utc_timestamp(),
            ),
        )
    except Exception as e:
        logger.exception(f"[{request_id}] Error processing voice command: {e}")
        return _json_response(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            VoiceCommandResponse(
                success=False,
                error="Voice processing failed",
                message=f"Processing failed: {e}",
                transcribed_text=transcribed_text,
                processing_time_ms=elapsed_ms(start),
                request_id=request_id,
                timestamp=utc_timestamp(),
            ),
        )
    finally:
        await audio.close()


@router.post("/execute-command")
async def execute_command(
    app_state: Annotated[AppState, Depends(get_app_state)],
    request: ExecuteCommandRequest,
) -> MatchResponse:
    """Resolve typed text against the user's commands."""
    request_id: Final = new_request_id("text")
    if request.user_id is None or not request.user_id.strip():
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail="user_id is required")
    templates: Final = app_state.database.get_command_templates(request.user_id)
    result: Final = resolve(request.user_input, templates, on_trace=make_logging_trace_hook(request_id))
    logger.info(f"[{request_id}] Match result for '{request.user_input}': {result}")
    return MatchResponse.from_match_result(result)


@router.post("/save-command")
async def save_command(
    app_state: Annotated[AppState, Depends(get_app_state)],
    request: SaveCommandRequest,
) -> SaveCommandResponse:
    request_id: Final = new_request_id("save")
    if not request.user_id or not request.command_name or not request.workflow_id:
        logger.error(f"[{request_id}] Missing required fields")
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="user_id, command_name, and workflow_id are required",
        )
    try:
        saved: Final = app_state.database.add_command(
            user_id=request.user_id,
            command_name=request.command_name,
            workflow_id=request.workflow_id,
            has_parameter=request.has_parameter,
            parameter_name=request.parameter_name,
        )
    except ValueError as e:
        logger.error(f"[{request_id}] Failed to save command: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
    logger.info(f"[{request_id}] Saved command '{saved.command_name}' (ID = {saved.id})")
    return SaveCommandResponse(id=saved.id, created_at=saved.created_at, request_id=request_id)


@router.get("/commands/{user_id}")
async def list_commands(
    app_state: Annotated[AppState, Depends(get_app_state)],
    user_id: str,
) -> list[StoredCommandModel]:
    return [StoredCommandModel.from_stored_command(command) for command in app_state.database.get_commands(user_id)]


@router.delete("/commands/workflow/{workflow_id}")
async def delete_workflow_commands(
    app_state: Annotated[AppState, Depends(get_app_state)],
    workflow_id: str,
    request: DeleteWorkflowCommandsRequest,
) -> DeleteWorkflowCommandsResponse:
    """Delete every command one user has bound to the given workflow."""
    request_id: Final = new_request_id("delete-workflow")
    if request.user_id is None or not request.user_id.strip():
        logger.error(f"[{request_id}] Missing user ID")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail="Missing user ID")
    removed: Final = app_state.database.remove_commands_for_workflow(
        workflow_id=workflow_id,
        user_id=request.user_id,
    )
    logger.info(f"[{request_id}] Deleted {len(removed)} commands of workflow '{workflow_id}'")
    return DeleteWorkflowCommandsResponse(
        message=(
            f"Successfully deleted {len(removed)} voice commands" if removed else "No commands found for this workflow"
        ),
        deleted_count=len(removed),
        commands=[StoredCommandModel.from_stored_command(command) for command in removed],
        workflow_id=workflow_id,
        user_id=request.user_id,
        request_id=request_id,
        timestamp=utc_timestamp(),
    )


@router.delete("/commands/{command_id}")
async def delete_command(
    app_state: Annotated[AppState, Depends(get_app_state)],
    command_id: int,
) -> DeleteCommandResponse:
    request_id: Final = new_request_id("delete-cmd")
    try:
        removed: Final = app_state.database.remove_command(id_=command_id)
    except KeyError as e:
        logger.error(f"[{request_id}] Failed to delete command: {e}")
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Command not found") from e
    logger.info(f"[{request_id}] Deleted command '{removed.command_name}' (ID = {removed.id})")
    return DeleteCommandResponse(
        command=StoredCommandModel.from_stored_command(removed),
        request_id=request_id,
    )
