"""ElevenLabs implementation of the TranscriptionProvider interface."""

from typing import Any

import httpx
from gateway_common import setup_logging

from config import ProviderConfig
from domain.models import (
    InvalidProviderResponse,
    ProviderFailed,
    ProviderOutcome,
    TranscriptionSucceeded,
    UploadedAudio,
)
from exceptions import ProviderNotConfiguredError
from interfaces import TranscriptionProvider

logger = setup_logging()

SPEECH_TO_TEXT_PATH = "/v1/speech-to-text"
API_KEY_HEADER = "xi-api-key"


def _response_body(response: httpx.Response) -> Any:
    """Returns the decoded JSON body, falling back to raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ElevenLabsTranscriber(TranscriptionProvider):
    """
    Relays buffered audio to the ElevenLabs speech-to-text API.

    Every call is a single attempt: no retry, no caching. The multipart body
    always carries the audio under a fixed filename and the pinned model id.
    """

    name = "elevenlabs"

    def __init__(self, client: httpx.AsyncClient, config: ProviderConfig):
        self._client = client
        self._config = config

    @property
    def endpoint(self) -> str:
        return self._config.base_url.rstrip("/") + SPEECH_TO_TEXT_PATH

    async def transcribe(self, audio: UploadedAudio) -> ProviderOutcome:
        if not self._config.api_key:
            raise ProviderNotConfiguredError(self.name)

        files = {
            "file": (self._config.upload_filename, audio.data, audio.content_type),
        }
        data = {"model_id": self._config.model_id}

        try:
            response = await self._client.post(
                self.endpoint,
                headers={API_KEY_HEADER: self._config.api_key},
                files=files,
                data=data,
                timeout=self._config.timeout_seconds,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.exception(
                "Transcription provider request failed",
                extra={"provider": self.name, "audio_bytes": audio.size},
            )
            return ProviderFailed(details=str(e) or type(e).__name__)

        body = _response_body(response)

        if not response.is_success:
            logger.warning(
                "Transcription provider returned an error",
                extra={"provider": self.name, "status_code": response.status_code},
            )
            return ProviderFailed(status_code=response.status_code, details=body)

        text = body.get("text") if isinstance(body, dict) else None
        if not isinstance(text, str):
            logger.error(
                "Transcription provider response has no text field",
                extra={"provider": self.name, "status_code": response.status_code},
            )
            return InvalidProviderResponse(details=body)

        logger.info(
            "Audio transcription successful",
            extra={
                "provider": self.name,
                "audio_bytes": audio.size,
                "transcript_chars": len(text),
            },
        )
        return TranscriptionSucceeded(text=text)
