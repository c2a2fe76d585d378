"""
Marks Memo Verifier module.

Provides AI-backed verification of academic marks memos with a simulation
fallback for offline demos.
"""

from .agent import (
    verify_marks_memo,
    verify_marks_memo_base64,
    create_verifier,
    get_default_verifier,
    MarksMemoVerifier,
    GeminiMarksMemoVerifier,
    SimulatedMarksMemoVerifier,
    VerificationResult,
    EmptyResponseError,
)

__all__ = [
    "verify_marks_memo",
    "verify_marks_memo_base64",
    "create_verifier",
    "get_default_verifier",
    "MarksMemoVerifier",
    "GeminiMarksMemoVerifier",
    "SimulatedMarksMemoVerifier",
    "VerificationResult",
    "EmptyResponseError",
]
