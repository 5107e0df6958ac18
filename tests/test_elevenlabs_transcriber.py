from __future__ import annotations

import asyncio

import httpx
import pytest

from config import ProviderConfig, load_config
from domain import InvalidProviderResponse, ProviderFailed, TranscriptionSucceeded, UploadedAudio
from exceptions import ProviderNotConfiguredError
from infrastructure import ElevenLabsTranscriber
from tests.conftest import ProviderStub


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def _transcriber(
    stub: ProviderStub, api_key: str | None = "secret", timeout_seconds: float | None = 120.0
) -> ElevenLabsTranscriber:
    client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
    config = ProviderConfig(
        api_key=api_key, base_url="https://stt.example.test/", timeout_seconds=timeout_seconds
    )
    return ElevenLabsTranscriber(client, config)


AUDIO = UploadedAudio(data=b"\x1aE\xdf\xa3webm-bytes", content_type="audio/webm", filename="my recording.webm")


def test_request_carries_audio_model_and_key():
    stub = ProviderStub()

    outcome = _run(_transcriber(stub).transcribe(AUDIO))

    assert outcome == TranscriptionSucceeded(text="hello")
    (request,) = stub.requests
    assert request.method == "POST"
    assert str(request.url) == "https://stt.example.test/v1/speech-to-text"
    assert request.headers["xi-api-key"] == "secret"
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.content
    assert b'name="model_id"' in body
    assert b"scribe_v1" in body
    assert b'name="file"; filename="audio.webm"' in body
    assert b"Content-Type: audio/webm" in body
    assert b"webm-bytes" in body
    assert b"my recording" not in body


def test_missing_key_raises_before_any_request():
    stub = ProviderStub()

    with pytest.raises(ProviderNotConfiguredError):
        _run(_transcriber(stub, api_key=None).transcribe(AUDIO))

    assert stub.call_count == 0


def test_non_success_status_yields_provider_failure():
    stub = ProviderStub()
    stub.reply(status_code=422, json_body={"detail": {"status": "invalid_file"}})

    outcome = _run(_transcriber(stub).transcribe(AUDIO))

    assert isinstance(outcome, ProviderFailed)
    assert outcome.status_code == 422
    assert outcome.details == {"detail": {"status": "invalid_file"}}


def test_timeout_yields_provider_failure_without_status():
    stub = ProviderStub()
    stub.error = httpx.ReadTimeout("timed out")

    outcome = _run(_transcriber(stub).transcribe(AUDIO))

    assert isinstance(outcome, ProviderFailed)
    assert outcome.status_code is None
    assert outcome.details == "timed out"


@pytest.mark.parametrize(
    "raw_body",
    [b"not json", b'["text"]', b'{"text": 42}'],
)
def test_unusable_success_body_is_invalid_response(raw_body):
    stub = ProviderStub()
    stub.reply(status_code=200, raw_body=raw_body)

    outcome = _run(_transcriber(stub).transcribe(AUDIO))

    assert isinstance(outcome, InvalidProviderResponse)


def test_configured_timeout_reaches_the_request():
    stub = ProviderStub()

    _run(_transcriber(stub, timeout_seconds=7.5).transcribe(AUDIO))

    (request,) = stub.requests
    assert request.extensions["timeout"] == {
        "connect": 7.5,
        "read": 7.5,
        "write": 7.5,
        "pool": 7.5,
    }


def test_zero_timeout_setting_sends_request_without_timeout(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("ELEVENLABS_API_KEY", "secret")
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "0")
    stub = ProviderStub()
    client = httpx.AsyncClient(transport=httpx.MockTransport(stub))

    _run(ElevenLabsTranscriber(client, load_config().provider).transcribe(AUDIO))

    (request,) = stub.requests
    assert set(request.extensions["timeout"].values()) == {None}


def test_invalid_url_yields_provider_failure():
    stub = ProviderStub()
    stub.error = httpx.InvalidURL("Invalid URL 'stt.example.test'")

    outcome = _run(_transcriber(stub).transcribe(AUDIO))

    assert isinstance(outcome, ProviderFailed)
    assert outcome.status_code is None
    assert "Invalid URL" in outcome.details
