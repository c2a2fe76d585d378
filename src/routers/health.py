"""
Health check router with verifier mode reporting.
"""
from fastapi import APIRouter, Depends

from marks_memo_verifier import MarksMemoVerifier
from src.config import ENVIRONMENT
from src.dependencies import get_app_state, get_verifier
from src.state import AppState

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    state: AppState = Depends(get_app_state),
    verifier: MarksMemoVerifier = Depends(get_verifier)
):
    """Health check endpoint.

    verification_mode is "gemini" when a Gemini API key is configured and
    "simulated" otherwise.
    """
    return {
        "status": "healthy",
        "service": "scholar-connect-backend",
        "environment": ENVIRONMENT,
        "verification_mode": verifier.mode,
        "students": len(state.students),
    }
