"""FastAPI dependency injection configuration."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from config import AppConfig, UploadConfig
from domain import HealthReporter
from infrastructure import ElevenLabsTranscriber, SQLDataStore
from interfaces import DataStore, TranscriptionProvider


def build_store(config: AppConfig) -> DataStore:
    """Creates the data-store handle described by the configuration."""
    return SQLDataStore.from_url(config.database.url)


def build_http_client() -> httpx.AsyncClient:
    """Creates the shared outbound HTTP client. Per-call timeouts come from config."""
    return httpx.AsyncClient(timeout=None)


def get_config(request: Request) -> AppConfig:
    """Returns the configuration the application was started with."""
    return request.app.state.config


def get_store(request: Request) -> DataStore:
    """Returns the process-wide data-store handle."""
    return request.app.state.store


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Returns the process-wide outbound HTTP client."""
    return request.app.state.http_client


ConfigDep = Annotated[AppConfig, Depends(get_config)]


def get_upload_config(config: ConfigDep) -> UploadConfig:
    """Returns the upload limits."""
    return config.upload


def get_transcriber(
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    config: ConfigDep,
) -> TranscriptionProvider:
    """Returns the configured transcription provider."""
    return ElevenLabsTranscriber(client, config.provider)


def get_health_reporter(
    store: Annotated[DataStore, Depends(get_store)],
) -> HealthReporter:
    """Returns a health reporter bound to the data store."""
    return HealthReporter(store)
