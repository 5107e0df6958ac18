"""Concrete implementations of infrastructure interfaces."""

from .elevenlabs_transcriber import ElevenLabsTranscriber
from .sql_store import SQLDataStore

__all__ = ["ElevenLabsTranscriber", "SQLDataStore"]
