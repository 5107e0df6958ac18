"""Domain models for the transcription gateway."""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class UploadedAudio(BaseModel, frozen=True):
    """An audio upload buffered in memory for the lifetime of one request."""

    data: bytes = Field(min_length=1)
    content_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


class TranscriptionSucceeded(BaseModel, frozen=True):
    """The provider returned a transcript."""

    kind: Literal["success"] = "success"
    text: str


class ProviderFailed(BaseModel, frozen=True):
    """
    The provider rejected the request or could not be reached.

    ``details`` carries the provider's error body unmodified, or the transport
    error message when no response was received (``status_code`` is then None).
    """

    kind: Literal["provider_error"] = "provider_error"
    status_code: int | None = None
    details: Any = None


class InvalidProviderResponse(BaseModel, frozen=True):
    """The provider answered with a success status but an unusable body."""

    kind: Literal["invalid_response"] = "invalid_response"
    details: Any = None


ProviderOutcome = Annotated[
    Union[TranscriptionSucceeded, ProviderFailed, InvalidProviderResponse],
    Field(discriminator="kind"),
]


class HealthSnapshot(BaseModel, frozen=True):
    """Point-in-time process and data-store status."""

    ok: bool
    store: Literal["up", "down"]
    ts: datetime
