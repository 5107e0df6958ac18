"""Abstract interfaces for infrastructure dependencies."""

from .data_store import DataStore
from .transcription_provider import TranscriptionProvider

__all__ = ["DataStore", "TranscriptionProvider"]
