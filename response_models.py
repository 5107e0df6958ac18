"""Response models for the transcription gateway API."""

from typing import Any

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    transcription: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    details: Any = None

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
