"""
Donor endpoints - preferences and the matched-students dashboard.
"""
import logging
from fastapi import APIRouter, Depends

from src.dependencies import get_donor_service
from src.models import DonorMatchesResponse, DonorPreferences
from src.services import DonorService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/donors", tags=["Donors"])


@router.put("/preferences", response_model=DonorPreferences)
async def save_preferences(
    preferences: DonorPreferences,
    service: DonorService = Depends(get_donor_service)
):
    """Save donor preferences and sign in as a donor."""
    saved = service.save_preferences(preferences)
    logger.info(f"Donor preferences saved (budget {saved.budget:.0f}/mo)")
    return saved


@router.get("/preferences", response_model=DonorPreferences)
async def get_preferences(service: DonorService = Depends(get_donor_service)):
    return service.get_preferences()


@router.get("/matches", response_model=DonorMatchesResponse)
async def get_matches(service: DonorService = Depends(get_donor_service)):
    """Verified students for the donor dashboard."""
    matches = service.matches()
    return DonorMatchesResponse(
        preferences=service.state.donor_preferences or DonorPreferences(),
        matches=matches,
        total=len(matches),
    )
