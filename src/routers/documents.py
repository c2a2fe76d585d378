"""
Marks Memo Verification Router

Handles document upload for the signed-in student. The verdict always comes
back with status 200; a failed verification is a negative verdict, not an
HTTP error.
"""
import logging
from fastapi import APIRouter, Depends, File, UploadFile

from src.dependencies import get_verification_service
from src.exceptions import ensure_supported_media_type
from src.models import MarksMemoBase64Request, VerificationResultResponse
from src.services import VerificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["Document Verification"])


@router.post("/marks-memo", response_model=VerificationResultResponse)
async def verify_marks_memo_upload(
    file: UploadFile = File(..., description="Marks memo image or PDF"),
    service: VerificationService = Depends(get_verification_service)
):
    """
    Verify an uploaded marks memo.

    A valid verdict marks the current student verified and stores the
    extracted percentage.
    """
    mime_type = ensure_supported_media_type(file.content_type)
    data = await file.read()

    logger.info(f"Marks memo upload: {file.filename} ({mime_type}, {len(data)} bytes)")

    result = await service.verify_upload(data, mime_type)
    return VerificationResultResponse.from_result(result)


@router.post("/marks-memo/base64", response_model=VerificationResultResponse)
async def verify_marks_memo_base64_upload(
    request: MarksMemoBase64Request,
    service: VerificationService = Depends(get_verification_service)
):
    """Verify a base64-encoded marks memo (same behaviour as the multipart upload)."""
    mime_type = ensure_supported_media_type(request.mime_type, field="mime_type")

    result = await service.verify_upload_base64(request.file_base64, mime_type)
    return VerificationResultResponse.from_result(result)
