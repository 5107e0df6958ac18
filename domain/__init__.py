"""Domain layer exports."""

from .health_reporter import HealthReporter
from .models import (
    HealthSnapshot,
    InvalidProviderResponse,
    ProviderFailed,
    ProviderOutcome,
    TranscriptionSucceeded,
    UploadedAudio,
)

__all__ = [
    "HealthReporter",
    "HealthSnapshot",
    "InvalidProviderResponse",
    "ProviderFailed",
    "ProviderOutcome",
    "TranscriptionSucceeded",
    "UploadedAudio",
]
