"""Abstract interface for speech-to-text providers."""

from abc import ABC, abstractmethod

from domain.models import ProviderOutcome, UploadedAudio


class TranscriptionProvider(ABC):
    """Abstract base class for remote transcription backends."""

    @abstractmethod
    async def transcribe(self, audio: UploadedAudio) -> ProviderOutcome:
        """
        Sends buffered audio to the provider and maps its reply.

        Args:
            audio: The uploaded audio buffer and its declared content type.

        Returns:
            TranscriptionSucceeded, ProviderFailed or InvalidProviderResponse.

        Raises:
            ProviderNotConfiguredError: If no credential is available. No
                network call is made in that case.
        """
        pass
