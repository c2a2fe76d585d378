"""
Pydantic models for marks memo verification API.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from marks_memo_verifier import VerificationResult


class MarksMemoBase64Request(BaseModel):
    """Request to verify a base64-encoded marks memo."""

    file_base64: str = Field(
        ...,
        description="Base64-encoded document (image or PDF); a data URL prefix is allowed"
    )

    mime_type: str = Field(
        ...,
        description="Declared media type, e.g. image/jpeg or application/pdf"
    )


class VerificationResultResponse(BaseModel):
    """Verdict returned by the upload screen endpoints (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(
        ...,
        alias="isValid",
        description="True if document looks authentic and original"
    )

    percentage: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Overall percentage extracted from the document"
    )

    student_name: Optional[str] = Field(
        None,
        alias="studentName",
        description="Name found on the document"
    )

    reason: str = Field(
        ...,
        description="Reasoning for validity or invalidity"
    )

    @classmethod
    def from_result(cls, result: VerificationResult) -> "VerificationResultResponse":
        return cls(
            is_valid=result.is_valid,
            percentage=result.percentage,
            student_name=result.student_name,
            reason=result.reason,
        )
