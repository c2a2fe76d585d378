"""
Session models for the active user role.
"""
from typing import Optional
from pydantic import BaseModel

from .enums import UserRole
from .donor import DonorPreferences
from .student import Student


class SetRoleRequest(BaseModel):
    """Role chosen on the welcome screen."""
    role: UserRole


class SessionResponse(BaseModel):
    """Snapshot of the active session."""
    role: Optional[UserRole] = None
    current_student: Optional[Student] = None
    donor_preferences: Optional[DonorPreferences] = None
