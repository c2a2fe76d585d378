"""
Session endpoints - role selection on the welcome screen and logout.
"""
import logging
from fastapi import APIRouter, Depends

from src.dependencies import get_app_state
from src.models import SessionResponse, SetRoleRequest
from src.state import AppState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["Session"])


def _snapshot(state: AppState) -> SessionResponse:
    return SessionResponse(
        role=state.user_role,
        current_student=state.current_student,
        donor_preferences=state.donor_preferences,
    )


@router.get("", response_model=SessionResponse)
async def get_session(state: AppState = Depends(get_app_state)):
    """Current role, current student and donor preferences."""
    return _snapshot(state)


@router.put("/role", response_model=SessionResponse)
async def set_role(request: SetRoleRequest, state: AppState = Depends(get_app_state)):
    """Pick "student" or "donor" on the welcome screen."""
    state.set_user_role(request.role)
    logger.info(f"Role set to {request.role.value}")
    return _snapshot(state)


@router.delete("", response_model=SessionResponse)
async def logout(state: AppState = Depends(get_app_state)):
    """Clear the active role and current student."""
    state.set_user_role(None)
    logger.info("Logged out")
    return _snapshot(state)
