"""
Service layer for business logic.
"""
from .student_service import StudentService
from .donor_service import DonorService, preference_matches
from .verification_service import VerificationService

__all__ = [
    "StudentService",
    "DonorService",
    "preference_matches",
    "VerificationService",
]
