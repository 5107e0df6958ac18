"""Custom exceptions for the transcription gateway."""


class MissingConfigurationError(Exception):
    """Raised at startup when a required environment variable is absent."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Required configuration '{variable}' is not set")


class StoreConnectionError(Exception):
    """Raised when the data store cannot be reached at startup."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        self.cause = cause
        super().__init__("Failed to connect to the data store")


class MissingAudioError(Exception):
    """Raised when a transcription request carries no audio file."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"No file supplied in form field '{field_name}'")


class AudioTooLargeError(Exception):
    """Raised when an upload exceeds the configured size ceiling."""

    def __init__(self, size: int, max_bytes: int):
        self.size = size
        self.max_bytes = max_bytes
        super().__init__(f"Audio too large ({size} bytes). Max is {max_bytes}.")


class ProviderNotConfiguredError(Exception):
    """Raised when a transcription is requested without a provider credential."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Transcription provider '{provider}' is not configured")
