"""
Marks Memo Verifier for checking uploaded academic transcripts.

Uses Gemini 2.5-Flash vision capabilities to:
- Judge whether a marks memo looks authentic (not edited/fake)
- Extract the overall percentage (0-100)
- Extract the student's name if visible

Two interchangeable strategies implement the same interface:
- GeminiMarksMemoVerifier calls the Gemini API with a structured-output schema
- SimulatedMarksMemoVerifier returns a canned verdict for offline demos

create_verifier() picks one based on whether a credential is configured.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import asyncio
import base64
import binascii
import json
import logging
import os

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_SIMULATED_DELAY_SECONDS = 2.0

TECHNICAL_ERROR_REASON = "Could not verify document due to technical error."


# =============================================================================
# Data Classes for Results
# =============================================================================

@dataclass(frozen=True)
class VerificationResult:
    """Verdict for a single marks memo."""
    is_valid: bool
    percentage: float  # 0-100
    reason: str
    student_name: Optional[str] = None

    def to_dict(self) -> dict:
        """Wire format used by the upload screen (camelCase keys)."""
        return {
            "isValid": self.is_valid,
            "percentage": self.percentage,
            "studentName": self.student_name,
            "reason": self.reason,
        }


SIMULATED_RESULT = VerificationResult(
    is_valid=True,
    percentage=86.5,
    student_name="Detected Student Name",
    reason="Document appears to be a valid original mark sheet with no signs of tampering.",
)

FAILED_RESULT = VerificationResult(
    is_valid=False,
    percentage=0,
    student_name=None,
    reason=TECHNICAL_ERROR_REASON,
)


class EmptyResponseError(Exception):
    """Raised when the model returns no text to decode."""


# =============================================================================
# Instruction and Response Schema
# =============================================================================

INSTRUCTION = (
    "Analyze this image. It should be a student's academic marks memo/transcript. "
    "Determine if it looks authentic (not edited/fake). "
    "Extract the overall percentage (0-100) and the student's name if visible. "
    "Respond in JSON."
)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "isValid": types.Schema(
            type=types.Type.BOOLEAN,
            description="True if document looks authentic and original.",
        ),
        "percentage": types.Schema(
            type=types.Type.NUMBER,
            description="The overall percentage or CGPA converted to percentage.",
        ),
        "studentName": types.Schema(
            type=types.Type.STRING,
            description="Name found on the document.",
        ),
        "reason": types.Schema(
            type=types.Type.STRING,
            description="Reasoning for validity or invalidity.",
        ),
    },
)


# =============================================================================
# Helper Functions
# =============================================================================

def decode_document(data_base64: str) -> bytes:
    """
    Decode a base64 document, tolerating a data URL prefix
    (e.g. "data:image/jpeg;base64,").
    """
    if data_base64.startswith("data:") and "," in data_base64:
        data_base64 = data_base64.split(",", 1)[1]
    return base64.b64decode(data_base64, validate=True)


def clamp_percentage(value: float) -> float:
    return max(0.0, min(100.0, value))


def parse_verification_response(response_text: Optional[str]) -> VerificationResult:
    """
    Decode the model's structured JSON text into a VerificationResult.

    Raises:
        EmptyResponseError: If the response has no text
        ValueError: If the text is not a JSON object with usable fields
    """
    if not response_text:
        raise EmptyResponseError("Empty response from AI")

    parsed = json.loads(response_text)
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")

    percentage = parsed.get("percentage", 0)
    if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
        raise ValueError(f"percentage is not a number: {percentage!r}")

    is_valid = parsed.get("isValid", False)
    if not isinstance(is_valid, bool):
        raise ValueError(f"isValid is not a boolean: {is_valid!r}")

    student_name = parsed.get("studentName")
    if student_name is not None and not isinstance(student_name, str):
        raise ValueError(f"studentName is not a string: {student_name!r}")

    reason = parsed.get("reason", "")
    if not isinstance(reason, str):
        raise ValueError(f"reason is not a string: {reason!r}")

    return VerificationResult(
        is_valid=is_valid,
        percentage=clamp_percentage(float(percentage)),
        student_name=student_name,
        reason=reason,
    )


def resolve_api_key() -> Optional[str]:
    """GOOGLE_API_KEY, falling back to API_KEY. Empty values count as unset."""
    return os.environ.get("GOOGLE_API_KEY") or os.environ.get("API_KEY") or None


def resolve_simulated_delay() -> float:
    return float(os.environ.get("SIMULATED_DELAY_SECONDS", DEFAULT_SIMULATED_DELAY_SECONDS))


# =============================================================================
# Verification Strategies
# =============================================================================

class MarksMemoVerifier(ABC):
    """Turns an uploaded marks memo into a VerificationResult. Never raises."""

    mode: str = "unknown"

    @abstractmethod
    async def verify(self, data: bytes, mime_type: str) -> VerificationResult:
        ...


class SimulatedMarksMemoVerifier(MarksMemoVerifier):
    """Offline demo strategy used when no API key is configured."""

    mode = "simulated"

    def __init__(self, delay_seconds: float = DEFAULT_SIMULATED_DELAY_SECONDS):
        self.delay_seconds = delay_seconds

    async def verify(self, data: bytes, mime_type: str) -> VerificationResult:
        logger.warning("No API Key found, simulating AI response")
        await asyncio.sleep(self.delay_seconds)
        return SIMULATED_RESULT


class GeminiMarksMemoVerifier(MarksMemoVerifier):
    """Sends the document to Gemini with a structured-output schema."""

    mode = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        client: Optional[genai.Client] = None,
    ):
        self.model = model
        self._client = client or genai.Client(api_key=api_key)

    async def verify(self, data: bytes, mime_type: str) -> VerificationResult:
        logger.info("=" * 60)
        logger.info("MARKS MEMO VERIFIER: Starting verification")
        logger.info("=" * 60)
        logger.info(f"Document size: {len(data)} bytes")
        logger.info(f"Media type: {mime_type}")
        logger.info(f"Model: {self.model}")

        try:
            # Blob serializes its bytes as base64 on the wire
            content = types.Content(
                role="user",
                parts=[
                    types.Part(
                        inline_data=types.Blob(
                            mime_type=mime_type,
                            data=bytes(data),
                        )
                    ),
                    types.Part(text=INSTRUCTION),
                ],
            )

            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=[content],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA,
                ),
            )

            response_text = getattr(response, "text", None)
            logger.debug(f"Raw response: {(response_text or '')[:500]}")
            result = parse_verification_response(response_text)

        except Exception as e:
            logger.error(f"AI Verification Failed: {type(e).__name__}: {e}")
            return FAILED_RESULT

        logger.info("-" * 40)
        logger.info(f"Valid            : {result.is_valid}")
        logger.info(f"Percentage       : {result.percentage:.1f}")
        logger.info(f"Student Name     : {result.student_name or 'N/A'}")
        logger.info(f"Reason           : {result.reason}")
        logger.info("=" * 60)

        return result


def create_verifier(
    api_key: Optional[str] = None,
    model: str = DEFAULT_MODEL,
    simulated_delay_seconds: float = DEFAULT_SIMULATED_DELAY_SECONDS,
) -> MarksMemoVerifier:
    """Pick the Gemini strategy when a key is configured, simulation otherwise."""
    if api_key:
        return GeminiMarksMemoVerifier(api_key=api_key, model=model)
    return SimulatedMarksMemoVerifier(delay_seconds=simulated_delay_seconds)


# =============================================================================
# Main Verification Functions
# =============================================================================

_default_verifier: Optional[MarksMemoVerifier] = None


def get_default_verifier() -> MarksMemoVerifier:
    """Verifier built from the environment on first use."""
    global _default_verifier
    if _default_verifier is None:
        _default_verifier = create_verifier(
            api_key=resolve_api_key(),
            model=os.environ.get("VERIFICATION_MODEL", DEFAULT_MODEL),
            simulated_delay_seconds=resolve_simulated_delay(),
        )
    return _default_verifier


async def verify_marks_memo(
    data: bytes,
    mime_type: str,
    verifier: Optional[MarksMemoVerifier] = None,
) -> VerificationResult:
    """
    Verify a marks memo document.

    Args:
        data: Raw document bytes (image or PDF)
        mime_type: Declared media type of the document
        verifier: Strategy to use (defaults to one built from the environment)

    Returns:
        VerificationResult; failures come back as a negative verdict
    """
    verifier = verifier or get_default_verifier()
    return await verifier.verify(data, mime_type)


async def verify_marks_memo_base64(
    data_base64: str,
    mime_type: str,
    verifier: Optional[MarksMemoVerifier] = None,
) -> VerificationResult:
    """
    Convenience wrapper for base64-encoded documents.

    Returns:
        VerificationResult; invalid base64 comes back as a negative verdict
    """
    try:
        data = decode_document(data_base64)
    except (binascii.Error, ValueError) as e:
        logger.error(f"Failed to decode base64 document: {e}")
        return FAILED_RESULT

    return await verify_marks_memo(data, mime_type, verifier)
