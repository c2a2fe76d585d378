"""
In-memory application state.

One AppState is created per app during startup and handed to services via
dependency injection. All mutation goes through the methods below.
"""
import logging
from typing import Any, Optional

from src.exceptions import NotFoundError
from src.models import DonorPreferences, Student, UserRole

logger = logging.getLogger(__name__)


class AppState:
    """Students, the current student, donor preferences and the active role."""

    def __init__(self, students: Optional[list[Student]] = None):
        self._students: list[Student] = list(students or [])
        self._current_student_id: Optional[str] = None
        self._donor_preferences: Optional[DonorPreferences] = None
        self._user_role: Optional[UserRole] = None

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    @property
    def current_student(self) -> Optional[Student]:
        if self._current_student_id is None:
            return None
        return self._find(self._current_student_id)

    @property
    def donor_preferences(self) -> Optional[DonorPreferences]:
        return self._donor_preferences

    @property
    def user_role(self) -> Optional[UserRole]:
        return self._user_role

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._find(student_id)

    # -------------------------------------------------------------------------
    # Update operations
    # -------------------------------------------------------------------------

    def add_student(self, student: Student) -> Student:
        """Append a student and make it the current student."""
        self._students.append(student)
        self._current_student_id = student.id
        logger.info(f"Added student {student.id} ({student.full_name})")
        return student

    def update_student(self, student_id: str, **changes: Any) -> Student:
        """
        Merge changes into a student record.

        The merged record is re-validated, so out-of-range values raise
        pydantic.ValidationError and leave the state untouched.

        Raises:
            NotFoundError: If no student has this id
        """
        for index, student in enumerate(self._students):
            if student.id == student_id:
                updated = Student.model_validate({**student.model_dump(), **changes})
                self._students[index] = updated
                logger.info(f"Updated student {student_id}: {', '.join(sorted(changes))}")
                return updated
        raise NotFoundError("Student", student_id)

    def update_current_student(self, **changes: Any) -> Optional[Student]:
        """Update the current student; no-op when nobody is registered."""
        if self._current_student_id is None:
            logger.warning("update_current_student called without a current student")
            return None
        return self.update_student(self._current_student_id, **changes)

    def set_donor_preferences(self, preferences: DonorPreferences) -> DonorPreferences:
        self._donor_preferences = preferences
        return preferences

    def set_user_role(self, role: Optional[UserRole]) -> None:
        """Set the active role. None logs out and forgets the current student."""
        self._user_role = role
        if role is None:
            self._current_student_id = None

    def _find(self, student_id: str) -> Optional[Student]:
        for student in self._students:
            if student.id == student_id:
                return student
        return None
