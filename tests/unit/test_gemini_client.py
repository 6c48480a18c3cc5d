"""Unit tests for the Gemini request adapter."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from burmese_ai.config import GeminiSettings
from burmese_ai.errors import (
    ContentBlockedError,
    EmptyResponseError,
    InvalidCredentialError,
    MalformedStructuredOutputError,
    MissingCredentialError,
    TransportFailureError,
    UpstreamError,
)
from burmese_ai.llm.gemini_client import GeminiClient, parse_structured_text, strip_json_fence
from tests.gemini_stub import GeminiStub


def test_text_mode_sends_prompt_as_single_part_with_text_temperature(
    gemini_stub: GeminiStub,
) -> None:
    """Free-text calls should send one content part and no JSON mime type."""

    gemini_stub.queue_text("မင်္ဂလာပါ")
    client = GeminiClient(api_key="test-key")

    result = asyncio.run(client.submit("Say hello"))

    assert result == "မင်္ဂလာပါ"
    payload = gemini_stub.last_payload()
    assert payload == {
        "contents": [{"parts": [{"text": "Say hello"}]}],
        "generationConfig": {"temperature": 0.7},
    }


def test_structured_mode_requests_json_with_low_temperature(gemini_stub: GeminiStub) -> None:
    """JSON-mode calls should request `application/json` at temperature 0.2."""

    gemini_stub.queue_json_text({"ok": True})
    client = GeminiClient(api_key="test-key")

    result = asyncio.run(client.submit("Return JSON", expect_structured=True))

    assert result == {"ok": True}
    config = gemini_stub.last_payload()["generationConfig"]
    assert config == {"temperature": 0.2, "responseMimeType": "application/json"}


def test_request_targets_model_endpoint_with_key_query_parameter(
    gemini_stub: GeminiStub,
) -> None:
    """The API key should travel as the `key` query parameter of the model URL."""

    gemini_stub.queue_text("ok")
    client = GeminiClient(api_key="  test-key  ")

    asyncio.run(client.generate_text("ping"))

    request = gemini_stub.requests[0]
    assert request.method == "POST"
    assert request.url.host == "generativelanguage.googleapis.com"
    assert request.url.path == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert request.url.params["key"] == "test-key"


def test_custom_settings_change_model_and_temperatures(gemini_stub: GeminiStub) -> None:
    """Settings should drive the model path and sampling temperature."""

    gemini_stub.queue_text("ok")
    settings = GeminiSettings(model="gemini-2.0-pro", text_temperature=1.1)
    client = GeminiClient(api_key="test-key", settings=settings)

    asyncio.run(client.generate_text("ping"))

    assert gemini_stub.requests[0].url.path.endswith("/models/gemini-2.0-pro:generateContent")
    assert gemini_stub.last_payload()["generationConfig"]["temperature"] == 1.1


@pytest.mark.parametrize("api_key", ["", "   ", None])
def test_missing_key_fails_before_any_request(
    gemini_stub: GeminiStub, api_key: str | None
) -> None:
    """Blank credentials should fail without touching the network."""

    client = GeminiClient(api_key=api_key)

    with pytest.raises(MissingCredentialError):
        asyncio.run(client.submit("ping"))
    assert gemini_stub.requests == []


def test_invalid_key_message_maps_to_invalid_credential(gemini_stub: GeminiStub) -> None:
    """An `API key not valid` upstream message should map to `InvalidCredentialError`."""

    gemini_stub.queue_payload(
        {
            "error": {
                "code": 400,
                "message": "API key not valid. Please pass a valid API key.",
                "status": "INVALID_ARGUMENT",
            }
        },
        status_code=400,
    )
    client = GeminiClient(api_key="bad-key")

    with pytest.raises(InvalidCredentialError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.status_code == 400
    assert "API Key" in str(exc_info.value)


def test_invalid_key_is_detected_when_message_contains_the_key(
    gemini_stub: GeminiStub,
) -> None:
    """Redacting a key that occurs in the message must not hide the credential failure."""

    gemini_stub.queue_payload(
        {"error": {"message": "API key not valid. Please pass a valid API key."}},
        status_code=400,
    )
    client = GeminiClient(api_key="valid")

    with pytest.raises(InvalidCredentialError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.status_code == 400
    assert "valid." not in exc_info.value.upstream_message


def test_invalid_key_is_detected_past_the_message_length_cap(
    gemini_stub: GeminiStub,
) -> None:
    """A long upstream message should still map to `InvalidCredentialError`."""

    gemini_stub.queue_payload(
        {"error": {"message": "x" * 300 + " API key not valid."}},
        status_code=400,
    )
    client = GeminiClient(api_key="bad-key")

    with pytest.raises(InvalidCredentialError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.upstream_message.endswith("...")


def test_other_http_failure_maps_to_upstream_error_with_status(
    gemini_stub: GeminiStub,
) -> None:
    """Non-credential failures should carry the HTTP status and upstream message."""

    gemini_stub.queue_payload(
        {"error": {"code": 503, "message": "The model is overloaded."}},
        status_code=503,
    )
    client = GeminiClient(api_key="test-key")

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.status_code == 503
    assert exc_info.value.upstream_message == "The model is overloaded."
    assert "503" in str(exc_info.value)


def test_non_json_error_body_is_used_verbatim(gemini_stub: GeminiStub) -> None:
    """Plain-text error bodies should still surface as upstream messages."""

    gemini_stub.queue_raw("Bad Gateway", status_code=502)
    client = GeminiClient(api_key="test-key")

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.status_code == 502
    assert exc_info.value.upstream_message == "Bad Gateway"


def test_error_messages_redact_the_api_key(gemini_stub: GeminiStub) -> None:
    """Upstream messages echoing the key should not leak it."""

    gemini_stub.queue_payload(
        {"error": {"message": "Quota exceeded for key=secret-key-123"}},
        status_code=429,
    )
    client = GeminiClient(api_key="secret-key-123")

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert "secret-key-123" not in exc_info.value.upstream_message
    assert "[redacted-key]" in exc_info.value.upstream_message


def test_empty_candidates_with_block_reason_maps_to_content_blocked(
    gemini_stub: GeminiStub,
) -> None:
    """A blocked prompt should surface its block reason."""

    gemini_stub.queue_payload({"candidates": [], "promptFeedback": {"blockReason": "SAFETY"}})
    client = GeminiClient(api_key="test-key")

    with pytest.raises(ContentBlockedError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.reason == "SAFETY"
    assert "SAFETY" in str(exc_info.value)


@pytest.mark.parametrize(
    "payload",
    [
        {"candidates": []},
        {},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "MAX_TOKENS"}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
    ],
)
def test_missing_content_maps_to_empty_response(
    gemini_stub: GeminiStub, payload: dict[str, object]
) -> None:
    """Success responses without usable text should fail as `EmptyResponseError`."""

    gemini_stub.queue_payload(payload)
    client = GeminiClient(api_key="test-key")

    with pytest.raises(EmptyResponseError):
        asyncio.run(client.submit("ping"))


@pytest.mark.parametrize("body", [[], "x", 5, None])
def test_success_body_that_is_not_an_object_maps_to_upstream_error(
    gemini_stub: GeminiStub, body: object
) -> None:
    """A 200 reply whose JSON body is not an object should fail as `UpstreamError`."""

    gemini_stub.queue_payload(body)
    client = GeminiClient(api_key="test-key")

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.status_code == 200


def test_only_first_part_of_first_candidate_is_returned(gemini_stub: GeminiStub) -> None:
    """Extra parts and candidates should be ignored."""

    gemini_stub.queue_payload(
        {
            "candidates": [
                {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                {"content": {"parts": [{"text": "other"}]}},
            ]
        }
    )
    client = GeminiClient(api_key="test-key")

    assert asyncio.run(client.submit("ping")) == "first"


def test_fenced_json_reply_is_parsed(gemini_stub: GeminiStub) -> None:
    """A ```json fenced reply should parse to the enclosed value."""

    gemini_stub.queue_text('```json\n[{"incorrect": "a", "correct": "b"}]\n```')
    client = GeminiClient(api_key="test-key")

    result = asyncio.run(client.generate_json("check"))

    assert result == [{"incorrect": "a", "correct": "b"}]


def test_unparseable_structured_reply_keeps_raw_text(gemini_stub: GeminiStub) -> None:
    """JSON parse failures should carry the raw model text for diagnostics."""

    gemini_stub.queue_text("Sorry, I cannot help with that.")
    client = GeminiClient(api_key="test-key")

    with pytest.raises(MalformedStructuredOutputError) as exc_info:
        asyncio.run(client.generate_json("check"))
    assert exc_info.value.raw_text == "Sorry, I cannot help with that."


def test_transport_failure_chains_original_cause(gemini_stub: GeminiStub) -> None:
    """Connectivity errors should surface once with the original exception attached."""

    gemini_stub.queue_exception(httpx.ConnectError("network down"))
    client = GeminiClient(api_key="test-key")

    with pytest.raises(TransportFailureError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.timed_out is False
    assert len(gemini_stub.requests) == 1


def test_timeout_is_reported_as_timed_out_transport_failure(gemini_stub: GeminiStub) -> None:
    """Timeouts should be flagged on the transport failure."""

    gemini_stub.queue_exception(httpx.ReadTimeout("read timed out"))
    client = GeminiClient(api_key="test-key")

    with pytest.raises(TransportFailureError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.timed_out is True


@pytest.mark.parametrize(
    "error",
    [httpx.TooManyRedirects("too many redirects"), httpx.DecodingError("bad gzip stream")],
)
def test_other_request_errors_map_to_transport_failure(
    gemini_stub: GeminiStub, error: httpx.RequestError
) -> None:
    """Every httpx request error should surface as `TransportFailureError`."""

    gemini_stub.queue_exception(error)
    client = GeminiClient(api_key="test-key")

    with pytest.raises(TransportFailureError) as exc_info:
        asyncio.run(client.submit("ping"))
    assert exc_info.value.__cause__ is error
    assert exc_info.value.timed_out is False


def test_failed_call_is_not_retried(gemini_stub: GeminiStub) -> None:
    """Exactly one request should be sent even when it fails."""

    gemini_stub.queue_payload({"error": {"message": "boom"}}, status_code=500)
    gemini_stub.queue_text("would succeed on retry")
    client = GeminiClient(api_key="test-key")

    with pytest.raises(UpstreamError):
        asyncio.run(client.submit("ping"))
    assert len(gemini_stub.requests) == 1


def test_fence_stripping_is_transparent() -> None:
    """Fenced and bare JSON should parse to the same value."""

    bare = '{"isViolation": false, "violatedKeywords": []}'
    fenced = f"```json\n{bare}\n```"

    assert strip_json_fence(fenced) == bare
    assert parse_structured_text(fenced) == parse_structured_text(bare)


def test_fence_with_surrounding_prose_is_extracted() -> None:
    """A fenced block embedded in prose should still be located."""

    text = 'Here you go:\n```JSON\n{"a": 1}\n```\nThanks.'

    assert parse_structured_text(text) == {"a": 1}


def test_text_without_fence_is_unchanged() -> None:
    """Unfenced text should pass through `strip_json_fence` untouched."""

    assert strip_json_fence("[1, 2]") == "[1, 2]"
