"""
Scholar Connect Backend API Models.

This module re-exports all model classes for convenient importing.
"""

# Enums
from .enums import UserRole, GenderPreference

# Student models
from .student import (
    StudentDocument,
    Student,
    StudentRegistrationRequest,
    AcademicScore,
    StudentDetailResponse,
    StudentListResponse,
)

# Donor models
from .donor import DonorPreferences, DonorMatchesResponse

# Session models
from .session import SetRoleRequest, SessionResponse

# Verification models
from .verification import MarksMemoBase64Request, VerificationResultResponse

__all__ = [
    "UserRole",
    "GenderPreference",
    "StudentDocument",
    "Student",
    "StudentRegistrationRequest",
    "AcademicScore",
    "StudentDetailResponse",
    "StudentListResponse",
    "DonorPreferences",
    "DonorMatchesResponse",
    "SetRoleRequest",
    "SessionResponse",
    "MarksMemoBase64Request",
    "VerificationResultResponse",
]
