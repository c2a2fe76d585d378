"""
Tests for the marks memo verifier strategies.

Run with: pytest tests/test_marks_memo_verifier.py -v
"""
import base64
import json
import time

import pytest

import marks_memo_verifier.agent as agent
from marks_memo_verifier import (
    EmptyResponseError,
    GeminiMarksMemoVerifier,
    MarksMemoVerifier,
    SimulatedMarksMemoVerifier,
    VerificationResult,
    create_verifier,
    get_default_verifier,
    verify_marks_memo,
    verify_marks_memo_base64,
)
from marks_memo_verifier.agent import (
    FAILED_RESULT,
    TECHNICAL_ERROR_REASON,
    decode_document,
    parse_verification_response,
)
from tests.conftest import make_fake_client, text_response


class RecordingVerifier(MarksMemoVerifier):
    """Remembers what it was asked to verify."""

    mode = "recording"

    def __init__(self):
        self.calls = []

    async def verify(self, data, mime_type):
        self.calls.append((data, mime_type))
        return VerificationResult(is_valid=True, percentage=70, reason="ok")


class TestSimulatedVerifier:
    """Offline demo strategy."""

    @pytest.mark.asyncio
    async def test_returns_canned_result_after_two_seconds(self, jpeg_bytes: bytes):
        verifier = create_verifier(api_key=None)
        assert isinstance(verifier, SimulatedMarksMemoVerifier)

        started = time.monotonic()
        result = await verifier.verify(jpeg_bytes, "image/jpeg")
        elapsed = time.monotonic() - started

        assert elapsed >= 2.0, f"Simulation returned after {elapsed:.2f}s"
        assert result.to_dict() == {
            "isValid": True,
            "percentage": 86.5,
            "studentName": "Detected Student Name",
            "reason": "Document appears to be a valid original mark sheet with no signs of tampering.",
        }

    @pytest.mark.asyncio
    async def test_result_does_not_depend_on_input(self):
        verifier = SimulatedMarksMemoVerifier(delay_seconds=0)
        first = await verifier.verify(b"", "application/pdf")
        second = await verifier.verify(b"anything at all", "image/png")
        assert first == second
        assert first.is_valid is True
        assert first.percentage == 86.5


class TestGeminiVerifier:
    """Gemini strategy against a fake client."""

    @pytest.mark.asyncio
    async def test_decodes_structured_response_unchanged(self, jpeg_bytes: bytes):
        body = {
            "isValid": True,
            "percentage": 91.25,
            "studentName": "Harika R.",
            "reason": "Seal and signatures consistent with an original memo.",
        }
        client, models = make_fake_client(response=text_response(json.dumps(body)))
        verifier = GeminiMarksMemoVerifier(client=client)

        result = await verifier.verify(jpeg_bytes, "image/jpeg")

        assert result.to_dict() == body

    @pytest.mark.asyncio
    async def test_request_carries_document_instruction_and_schema(self, jpeg_bytes: bytes):
        client, models = make_fake_client(
            response=text_response('{"isValid": false, "percentage": 0, "studentName": "", "reason": "blurred"}')
        )
        verifier = GeminiMarksMemoVerifier(model="gemini-2.5-flash", client=client)

        await verifier.verify(jpeg_bytes, "image/jpeg")

        assert len(models.calls) == 1
        call = models.calls[0]
        assert call["model"] == "gemini-2.5-flash"

        parts = call["contents"][0].parts
        assert parts[0].inline_data.mime_type == "image/jpeg"
        assert parts[0].inline_data.data == jpeg_bytes
        assert "marks memo" in parts[1].text

        config = call["config"]
        assert config.response_mime_type == "application/json"
        assert set(config.response_schema.properties) == {"isValid", "percentage", "studentName", "reason"}

    @pytest.mark.asyncio
    async def test_empty_object_response_is_technical_error(self, jpeg_bytes: bytes):
        # Upstream returns {} with no text field at all
        client, _ = make_fake_client(response=object())
        verifier = GeminiMarksMemoVerifier(client=client)

        result = await verifier.verify(jpeg_bytes, "image/jpeg")

        assert result.is_valid is False
        assert result.percentage == 0
        assert result.reason == "Could not verify document due to technical error."

    @pytest.mark.asyncio
    async def test_empty_text_is_technical_error(self, jpeg_bytes: bytes):
        client, _ = make_fake_client(response=text_response(""))
        result = await GeminiMarksMemoVerifier(client=client).verify(jpeg_bytes, "image/jpeg")
        assert result == FAILED_RESULT

    @pytest.mark.asyncio
    async def test_upstream_exception_is_technical_error(self, jpeg_bytes: bytes):
        client, _ = make_fake_client(error=TimeoutError("upstream timed out"))
        result = await GeminiMarksMemoVerifier(client=client).verify(jpeg_bytes, "image/jpeg")
        assert result.is_valid is False
        assert result.percentage == 0
        assert result.reason

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [
        "not json",
        "[1, 2, 3]",
        '{"isValid": true, "percentage": "eighty"}',
        '{"isValid": "false", "percentage": 90, "reason": "tampered"}',
        '{"isValid": 1, "percentage": 90, "reason": "ok"}',
        '{"isValid": true, "percentage": 90, "reason": ["looks", "fine"]}',
        '{"isValid": true, "percentage": 90, "studentName": 42, "reason": "ok"}',
    ])
    async def test_malformed_body_is_technical_error(self, jpeg_bytes: bytes, text: str):
        client, _ = make_fake_client(response=text_response(text))
        result = await GeminiMarksMemoVerifier(client=client).verify(jpeg_bytes, "image/jpeg")
        assert result == FAILED_RESULT

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reported, expected", [(120, 100.0), (-4.5, 0.0), (73.4, 73.4)])
    async def test_percentage_kept_in_range(self, jpeg_bytes: bytes, reported: float, expected: float):
        body = json.dumps({"isValid": True, "percentage": reported, "reason": "ok"})
        client, _ = make_fake_client(response=text_response(body))
        result = await GeminiMarksMemoVerifier(client=client).verify(jpeg_bytes, "image/jpeg")
        assert result.percentage == expected
        assert 0 <= result.percentage <= 100


class TestParsing:

    def test_missing_text_raises_empty_response(self):
        with pytest.raises(EmptyResponseError):
            parse_verification_response(None)

    def test_missing_name_is_none(self):
        result = parse_verification_response('{"isValid": true, "percentage": 60, "reason": "fine"}')
        assert result.student_name is None

    def test_decode_document_strips_data_url_prefix(self, jpeg_bytes: bytes):
        encoded = base64.b64encode(jpeg_bytes).decode()
        assert decode_document(f"data:image/jpeg;base64,{encoded}") == jpeg_bytes
        assert decode_document(encoded) == jpeg_bytes


class TestStrategySelection:

    def test_key_selects_gemini(self):
        verifier = create_verifier(api_key="test-key")
        assert isinstance(verifier, GeminiMarksMemoVerifier)
        assert verifier.mode == "gemini"

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_no_key_selects_simulation(self, api_key):
        verifier = create_verifier(api_key=api_key, simulated_delay_seconds=0.5)
        assert isinstance(verifier, SimulatedMarksMemoVerifier)
        assert verifier.delay_seconds == 0.5

    def test_default_verifier_reads_environment(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setattr(agent, "_default_verifier", None)
        assert get_default_verifier().mode == "simulated"

        monkeypatch.setattr(agent, "_default_verifier", None)
        monkeypatch.setenv("API_KEY", "legacy-key")
        assert get_default_verifier().mode == "gemini"

    def test_default_verifier_uses_configured_delay(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setenv("SIMULATED_DELAY_SECONDS", "0.25")
        monkeypatch.setattr(agent, "_default_verifier", None)
        assert get_default_verifier().delay_seconds == 0.25

    @pytest.mark.parametrize("google_key, legacy_key, expected", [
        ("primary", "legacy", "primary"),
        ("", "legacy", "legacy"),
        ("", "", None),
    ])
    def test_api_key_resolution(self, monkeypatch, google_key, legacy_key, expected):
        monkeypatch.setenv("GOOGLE_API_KEY", google_key)
        monkeypatch.setenv("API_KEY", legacy_key)
        assert agent.resolve_api_key() == expected


class TestConvenienceFunctions:

    @pytest.mark.asyncio
    async def test_verify_marks_memo_uses_given_verifier(self, jpeg_bytes: bytes):
        verifier = RecordingVerifier()
        result = await verify_marks_memo(jpeg_bytes, "image/jpeg", verifier=verifier)
        assert verifier.calls == [(jpeg_bytes, "image/jpeg")]
        assert result.percentage == 70

    @pytest.mark.asyncio
    async def test_base64_wrapper_decodes_payload(self, jpeg_bytes: bytes):
        verifier = RecordingVerifier()
        encoded = base64.b64encode(jpeg_bytes).decode()
        await verify_marks_memo_base64(encoded, "image/jpeg", verifier=verifier)
        assert verifier.calls == [(jpeg_bytes, "image/jpeg")]

    @pytest.mark.asyncio
    async def test_base64_wrapper_rejects_invalid_encoding(self):
        verifier = RecordingVerifier()
        result = await verify_marks_memo_base64("!!not base64!!", "image/jpeg", verifier=verifier)
        assert verifier.calls == []
        assert result.is_valid is False
        assert result.reason == TECHNICAL_ERROR_REASON
