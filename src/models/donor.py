"""
Donor preference models.
"""
from pydantic import BaseModel, Field

from .enums import GenderPreference
from .student import Student


class DonorPreferences(BaseModel):
    """Filter criteria a donor sets to narrow matched students."""

    budget: float = Field(
        5000,
        ge=0,
        description="Monthly budget in rupees"
    )

    gender_pref: GenderPreference = Field(
        GenderPreference.ANY,
        description="Preferred student gender"
    )

    family_bg_pref: str = Field(
        "Any",
        description="Family background, e.g. 'Very Poor', 'Single Parent', 'Orphan'"
    )

    study_level_pref: str = Field(
        "Any",
        description="Study level, e.g. 'School', 'Intermediate', 'Degree', 'Engineering'"
    )

    location_pref: str = Field(
        "",
        description="Preferred location (optional)"
    )


class DonorMatchesResponse(BaseModel):
    """Students shown on the donor dashboard."""
    preferences: DonorPreferences
    matches: list[Student]
    total: int
