"""
FastAPI dependency injection factories.

This module provides dependency factories for the application state,
services, and the marks memo verifier. The state and verifier live on
app.state (set during app startup), so every app instance owns its own.
"""
from fastapi import Depends, Request

from marks_memo_verifier import MarksMemoVerifier
from src.state import AppState
from src.services import DonorService, StudentService, VerificationService


# =============================================================================
# Shared Resources
# =============================================================================

def get_app_state(request: Request) -> AppState:
    """Get the application state created during startup."""
    state = getattr(request.app.state, "app_state", None)
    if state is None:
        raise RuntimeError("AppState not initialized. Create it in the app lifespan.")
    return state


def get_verifier(request: Request) -> MarksMemoVerifier:
    """Get the marks memo verifier selected during startup."""
    verifier = getattr(request.app.state, "verifier", None)
    if verifier is None:
        raise RuntimeError("Verifier not initialized. Create it in the app lifespan.")
    return verifier


# =============================================================================
# Service Dependencies
# =============================================================================

def get_student_service(
    state: AppState = Depends(get_app_state)
) -> StudentService:
    """Get a StudentService instance."""
    return StudentService(state)


def get_donor_service(
    state: AppState = Depends(get_app_state)
) -> DonorService:
    """Get a DonorService instance."""
    return DonorService(state)


def get_verification_service(
    verifier: MarksMemoVerifier = Depends(get_verifier),
    student_service: StudentService = Depends(get_student_service)
) -> VerificationService:
    """Get a VerificationService instance."""
    return VerificationService(verifier, student_service)
