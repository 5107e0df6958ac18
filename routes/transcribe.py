"""Transcription gateway endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from gateway_common import setup_logging

from config import UploadConfig
from dependencies import get_transcriber, get_upload_config
from domain import InvalidProviderResponse, ProviderFailed, UploadedAudio
from exceptions import AudioTooLargeError, MissingAudioError, ProviderNotConfiguredError
from interfaces import TranscriptionProvider
from response_models import ErrorResponse, TranscriptionResponse

logger = setup_logging()

router = APIRouter(tags=["transcription"])

AUDIO_FIELD = "audio"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

TranscriberDep = Annotated[TranscriptionProvider, Depends(get_transcriber)]
UploadConfigDep = Annotated[UploadConfig, Depends(get_upload_config)]


def _error(status_code: int, error: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error).to_content(),
    )


def _upstream_error(error: str, details) -> HTTPException:
    # details is passed through as received, null included
    return HTTPException(
        status_code=500,
        detail=ErrorResponse(error=error, details=details).model_dump(),
    )


def _check_size(size: int | None, max_bytes: int) -> None:
    if max_bytes and size is not None and size > max_bytes:
        raise AudioTooLargeError(size, max_bytes)


async def receive_audio(audio: UploadFile | None, max_bytes: int) -> UploadedAudio:
    """
    Buffers an uploaded file fully in memory.

    The upload handle is always closed before returning.

    Raises:
        MissingAudioError: If no file part was sent or the file is empty.
        AudioTooLargeError: If the file exceeds ``max_bytes`` (0 disables).
    """
    if audio is None:
        raise MissingAudioError(AUDIO_FIELD)

    try:
        _check_size(audio.size, max_bytes)
        data = await audio.read()
    finally:
        await audio.close()

    if not data:
        raise MissingAudioError(AUDIO_FIELD)
    _check_size(len(data), max_bytes)

    return UploadedAudio(
        data=data,
        content_type=audio.content_type or DEFAULT_CONTENT_TYPE,
        filename=audio.filename,
    )


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    transcriber: TranscriberDep,
    upload_config: UploadConfigDep,
    audio: Annotated[UploadFile | None, File()] = None,
) -> TranscriptionResponse:
    """
    Transcribes an uploaded audio file.

    Forwards the buffered audio to the speech-to-text provider in a single
    attempt and returns its transcript.
    """
    try:
        uploaded = await receive_audio(audio, upload_config.max_bytes)
    except MissingAudioError:
        raise _error(400, "No audio file uploaded")
    except AudioTooLargeError as e:
        raise _error(413, str(e))

    logger.info(
        "Received transcription request",
        extra={
            "file_name": uploaded.filename,
            "content_type": uploaded.content_type,
            "size": uploaded.size,
        },
    )

    try:
        outcome = await transcriber.transcribe(uploaded)
    except ProviderNotConfiguredError as e:
        logger.error(str(e))
        raise _error(500, "Transcription provider is not configured")

    if isinstance(outcome, ProviderFailed):
        raise _upstream_error("Transcription failed", outcome.details)
    if isinstance(outcome, InvalidProviderResponse):
        raise _upstream_error(
            "Invalid response from transcription provider", outcome.details
        )

    return TranscriptionResponse(transcription=outcome.text)
