"""
Enums for Scholar Connect Backend API.
"""
from enum import Enum


class UserRole(str, Enum):
    """Who is using the app in the current session."""
    STUDENT = "student"
    DONOR = "donor"


class GenderPreference(str, Enum):
    FEMALE = "Female"
    MALE = "Male"
    ANY = "Any"

