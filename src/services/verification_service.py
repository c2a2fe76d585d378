"""
Verification service - runs the marks memo verifier and applies the verdict
to the student who uploaded it.
"""
import logging
from typing import Optional

from marks_memo_verifier import (
    MarksMemoVerifier,
    VerificationResult,
    verify_marks_memo,
    verify_marks_memo_base64,
)
from src.services.student_service import StudentService

logger = logging.getLogger(__name__)


class VerificationService:
    """Service for marks memo uploads."""

    def __init__(self, verifier: MarksMemoVerifier, student_service: StudentService):
        self.verifier = verifier
        self.student_service = student_service

    async def verify_upload(self, data: bytes, mime_type: str) -> VerificationResult:
        """Verify an uploaded document; a valid verdict verifies the uploading student."""
        uploader_id = self._uploader_id()
        result = await verify_marks_memo(data, mime_type, verifier=self.verifier)
        self._apply(result, uploader_id)
        return result

    async def verify_upload_base64(self, data_base64: str, mime_type: str) -> VerificationResult:
        """Same as verify_upload for base64 payloads; bad base64 is a negative verdict."""
        uploader_id = self._uploader_id()
        result = await verify_marks_memo_base64(data_base64, mime_type, verifier=self.verifier)
        self._apply(result, uploader_id)
        return result

    def _uploader_id(self) -> Optional[str]:
        # Taken before the verifier call; other requests may change the current student meanwhile
        current = self.student_service.state.current_student
        return current.id if current is not None else None

    def _apply(self, result: VerificationResult, uploader_id: Optional[str]) -> None:
        if not result.is_valid:
            logger.info(f"Marks memo rejected: {result.reason}")
            return

        if uploader_id is None:
            logger.info("Valid marks memo but no current student to update")
            return

        student = self.student_service.apply_verification(result, student_id=uploader_id)
        logger.info(f"Student {student.id} verified at {student.percentage:.1f}%")
