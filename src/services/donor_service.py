"""
Donor service - handles donor preferences and the matched-students dashboard.
"""
from src.exceptions import NotFoundError
from src.models import DonorPreferences, Student, UserRole
from src.state import AppState


def preference_matches(student: Student, preferences: DonorPreferences) -> bool:
    """
    Whether a student fits the donor's preferences.

    No matching rule has been defined yet (budget, gender, background, study
    level and location are collected but not compared), so every student
    passes.
    """
    return True


class DonorService:
    """Service for donor operations."""

    def __init__(self, state: AppState):
        self.state = state

    def save_preferences(self, preferences: DonorPreferences) -> DonorPreferences:
        """Store preferences and sign in as a donor."""
        self.state.set_donor_preferences(preferences)
        self.state.set_user_role(UserRole.DONOR)
        return preferences

    def get_preferences(self) -> DonorPreferences:
        preferences = self.state.donor_preferences
        if preferences is None:
            raise NotFoundError("Donor preferences", "current")
        return preferences

    def matches(self) -> list[Student]:
        """Verified students that pass the donor's preference filter."""
        preferences = self.state.donor_preferences or DonorPreferences()
        return [
            student
            for student in self.state.students
            if student.is_verified and preference_matches(student, preferences)
        ]
